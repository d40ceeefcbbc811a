"""Belt tracking risk advisor."""

from __future__ import annotations

from .advisor import (
    assess,
    format_number,
    is_tracking_selection_optimal,
    length_width_ratio,
    overall_risk,
    tracking_tooltip,
)
from .models import TrackingGuidance, TrackingRiskFactor

__all__ = [
    "assess",
    "format_number",
    "is_tracking_selection_optimal",
    "length_width_ratio",
    "overall_risk",
    "tracking_tooltip",
    "TrackingGuidance",
    "TrackingRiskFactor",
]
