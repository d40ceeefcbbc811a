"""Thresholds for the belt tracking risk advisor."""

from __future__ import annotations

# Length-to-width ratio bands
LW_RATIO_TOO_LOW_THRESHOLD: float = 2.0  # below: too short/wide for crowned
LW_RATIO_LOW_THRESHOLD: float = 3.0  # at or below: low risk
LW_RATIO_HIGH_THRESHOLD: float = 6.0  # above: high risk

# Belt speed bands in FPM
SPEED_MEDIUM_THRESHOLD: float = 100.0
SPEED_HIGH_THRESHOLD: float = 200.0

# Start/stop cycles shorter than this stress tracking
SHORT_CYCLE_SECONDS: float = 10.0

# Belts narrower than this need more frequent adjustment
NARROW_BELT_WIDTH_IN: float = 12.0

# Medium factors that together escalate overall risk to High
MEDIUM_FACTORS_FOR_HIGH: int = 2
