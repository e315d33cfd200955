"""Tests for the erg-engine command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from erg_engine.cli import build_parser, main


def _write(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload))
    return path


class TestCli:
    def test_score(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        workout = _write(
            tmp_path / "workout.json",
            {
                "totalTimeSeconds": 420,
                "totalDistanceMetres": 2000,
                "avgSplitSeconds": 105,
                "avgHeartRate": 180,
            },
        )
        profile = _write(
            tmp_path / "profile.json",
            {"age": 30, "weightKg": 75, "maxHr": 190, "restingHr": 50},
        )

        code = main(
            ["score", "--workout", str(workout), "--profile", str(profile), "--workout-id", "w1"]
        )

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["workoutId"] == "w1"
        assert output["effort"]["effortPoints"] == 72
        assert output["effort"]["zone"] == "training"
        assert output["personalBest"]["isPersonalBest"] is True
        assert output["heartRateAnalysis"]["available"] is True

    def test_score_intervals_with_workout_heart_rate(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        workout = _write(
            tmp_path / "workout.json",
            {
                "totalTimeSeconds": 420,
                "totalDistanceMetres": 2000,
                "avgHeartRate": 180,
                "intervals": [{"distanceMetres": 500, "timeSeconds": 105}] * 4,
            },
        )
        assert main(["score", "--workout", str(workout)]) == 0
        output = json.loads(capsys.readouterr().out)
        analysis = output["heartRateAnalysis"]
        assert analysis["available"] is True
        assert analysis["trend"]["pattern"] == "stable"
        assert analysis["drift"]["rating"] == "excellent"

    def test_score_ocr(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        workout = _write(tmp_path / "ocr.json", {"totalTimeSeconds": 105, "avgSplit": 540})
        assert main(["score", "--workout", str(workout), "--ocr"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["measurement"]["wasSwapped"] is True
        assert output["heartRateAnalysis"]["available"] is False

    def test_validate(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        raw = _write(tmp_path / "ocr.json", {"totalTimeSeconds": 105, "avgSplit": 540})
        assert main(["validate", "--raw", str(raw)]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["avgSplit"] == 105.0
        assert output["totalDistanceMetres"] == 2570

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["validate", "--raw", str(tmp_path / "absent.json")]) == 1

    def test_rejected_payload(self, tmp_path: Path) -> None:
        workout = _write(
            tmp_path / "workout.json", {"totalTimeSeconds": 420, "totalDistanceMetres": 250000}
        )
        assert main(["score", "--workout", str(workout)]) == 2

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
