"""Command-line entry point for repairing and scoring erg workouts.

Usage:
    erg-engine validate --raw ocr.json
    erg-engine score --workout workout.json --profile profile.json
    erg-engine score --workout ocr.json --ocr
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import uuid
from pathlib import Path
from typing import Any, Sequence

from erg_engine import config
from erg_engine.exceptions import ErgEngineError
from erg_engine.personal_best.store import InMemoryPersonalBestStore
from erg_engine.pipeline import WorkoutPipeline
from erg_engine.serialization import (
    decision_to_dict,
    effort_to_dict,
    heart_rate_analysis_to_dict,
    measurement_to_dict,
    to_json_string,
)
from erg_engine.validation.boundary import parse_profile, parse_raw_measurement

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> Any:
    with open(path) as f:
        return json.load(f)


def _cmd_validate(args: argparse.Namespace) -> int:
    payload = _load_json(args.raw)
    pipeline = WorkoutPipeline(store=InMemoryPersonalBestStore())
    measurement = pipeline.repair(parse_raw_measurement(payload))
    print(to_json_string(measurement_to_dict(measurement)))
    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    payload = _load_json(args.workout)
    profile = parse_profile(_load_json(args.profile) if args.profile else None)
    pipeline = WorkoutPipeline(store=InMemoryPersonalBestStore())

    result = pipeline.process_payload(
        payload,
        user_id=args.user_id,
        workout_id=args.workout_id or str(uuid.uuid4()),
        profile=profile,
        from_ocr=args.ocr,
    )

    analysis = pipeline.engine.analyse_heart_rate(profile, result.intervals)

    output = {
        "workoutId": result.workout.workout_id,
        "measurement": measurement_to_dict(result.measurement),
        "effort": effort_to_dict(result.workout.effort),
        "heartRateAnalysis": heart_rate_analysis_to_dict(analysis),
        "personalBest": decision_to_dict(result.personal_best),
    }
    print(to_json_string(output))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="erg-engine", description="Repair and score erg workouts")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Repair an OCR extraction")
    validate.add_argument("--raw", type=Path, required=True, help="OCR JSON file")
    validate.set_defaults(func=_cmd_validate)

    score = sub.add_parser("score", help="Repair, score and check for a personal best")
    score.add_argument("--workout", type=Path, required=True, help="Workout JSON file")
    score.add_argument("--profile", type=Path, help="Athlete profile JSON file")
    score.add_argument("--user-id", default="local", help="Athlete id")
    score.add_argument("--workout-id", help="Workout id (random if omitted)")
    score.add_argument("--ocr", action="store_true", help="Treat the workout as OCR output")
    score.set_defaults(func=_cmd_score)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except FileNotFoundError as exc:
        logger.error("File not found: %s", exc.filename)
        return 1
    except ErgEngineError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
