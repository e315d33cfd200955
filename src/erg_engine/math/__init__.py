"""Pure numeric functions: pace and power, effort scores, heart-rate analysis."""
