"""Belt tracking risk advisor.

Scores six independent factors and blends them into one recommendation:

- Length-to-width ratio
- Reversing operation
- Side loading
- Accumulation (start/stop with short cycles)
- Environment
- Belt speed

Any High factor, or two or more Medium factors, make the overall risk
High. Exactly one Medium factor makes it Medium. V-guided tracking is
recommended for Medium and High risk. The advisor is advisory only and
never produces blocking findings.
"""

from __future__ import annotations

import logging
import math

from conveyors.domain.entities import ConveyorInputs
from conveyors.domain.value_objects import (
    BeltTrackingMethod,
    DirectionMode,
    EnvironmentFactors,
    SideLoadingDirection,
    SideLoadingSeverity,
    TrackingRiskLevel,
)

from .constants import (
    LW_RATIO_HIGH_THRESHOLD,
    LW_RATIO_LOW_THRESHOLD,
    LW_RATIO_TOO_LOW_THRESHOLD,
    MEDIUM_FACTORS_FOR_HIGH,
    NARROW_BELT_WIDTH_IN,
    SHORT_CYCLE_SECONDS,
    SPEED_HIGH_THRESHOLD,
    SPEED_MEDIUM_THRESHOLD,
)
from .models import TrackingGuidance, TrackingRiskFactor

logger = logging.getLogger(__name__)

SUMMARIES: dict[TrackingRiskLevel, str] = {
    TrackingRiskLevel.LOW: "Crowned tracking is suitable for this application.",
    TrackingRiskLevel.MEDIUM: "V-guided tracking is recommended for improved reliability.",
    TrackingRiskLevel.HIGH: (
        "V-guided tracking is strongly recommended due to demanding conditions."
    ),
}


def length_width_ratio(length_in: float, width_in: float) -> float:
    """Conveyor length over belt width; infinite for a non-positive width."""
    if not width_in or width_in <= 0:
        return math.inf
    return length_in / width_in


def assess_length_width_ratio(length_in: float, width_in: float) -> TrackingRiskFactor:
    ratio = length_width_ratio(length_in, width_in)
    name = "Length-to-Width Ratio"
    if ratio <= LW_RATIO_LOW_THRESHOLD:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.LOW,
            f"L:W ratio of {ratio:.1f}:1 is favorable for crowned tracking.",
        )
    if ratio <= LW_RATIO_HIGH_THRESHOLD:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            f"L:W ratio of {ratio:.1f}:1 is moderate. "
            "Consider V-guided for better tracking stability.",
        )
    return TrackingRiskFactor(
        name,
        TrackingRiskLevel.HIGH,
        f"L:W ratio of {ratio:.1f}:1 is high. V-guided tracking is strongly recommended.",
    )


def assess_direction_mode(direction_mode: DirectionMode) -> TrackingRiskFactor:
    name = "Reversing Operation"
    if direction_mode == DirectionMode.REVERSING:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.HIGH,
            "Reversing operation makes crowned tracking unreliable. "
            "V-guided is strongly recommended.",
        )
    return TrackingRiskFactor(
        name,
        TrackingRiskLevel.LOW,
        "One-direction operation is compatible with crowned tracking.",
    )


def assess_side_loading(
    direction: SideLoadingDirection, severity: SideLoadingSeverity | None
) -> TrackingRiskFactor:
    name = "Side Loading"
    if direction == SideLoadingDirection.NONE:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.LOW,
            "No side loading allows crowned tracking to work effectively.",
        )

    side = direction.value.lower()
    if severity == SideLoadingSeverity.LIGHT:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            f"Light side loading from {side} may cause occasional mis-tracking "
            "with crowned pulleys.",
        )
    if severity == SideLoadingSeverity.MODERATE:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            f"Moderate side loading from {side} increases tracking difficulty. "
            "V-guided is recommended.",
        )
    return TrackingRiskFactor(
        name,
        TrackingRiskLevel.HIGH,
        f"Heavy side loading from {side} will likely cause belt mis-tracking. "
        "V-guided is strongly recommended.",
    )


def assess_accumulation(
    start_stop_application: bool, cycle_time_seconds: float | None
) -> TrackingRiskFactor:
    name = "Accumulation"
    if not start_stop_application:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.LOW,
            "Continuous operation without accumulation is ideal for crowned tracking.",
        )
    if cycle_time_seconds is not None and cycle_time_seconds < SHORT_CYCLE_SECONDS:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            f"Frequent start/stop ({format_number(cycle_time_seconds)}s cycle) "
            "with accumulation may stress belt tracking.",
        )
    return TrackingRiskFactor(
        name,
        TrackingRiskLevel.LOW,
        "Start/stop operation with adequate cycle time is compatible with crowned tracking.",
    )


def assess_environment(environment: EnvironmentFactors) -> TrackingRiskFactor:
    name = "Environment"
    if environment == EnvironmentFactors.WASHDOWN:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            "Washdown environments may cause belt slip on crowned pulleys. "
            "Consider V-guided or lagged pulleys.",
        )
    if environment == EnvironmentFactors.DUSTY:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            "Dusty environments can affect belt grip on crowned pulleys. "
            "Regular maintenance is important.",
        )
    if environment == EnvironmentFactors.OUTDOOR:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.LOW,
            "Outdoor installation is compatible with crowned tracking "
            "with proper belt selection.",
        )
    return TrackingRiskFactor(
        name,
        TrackingRiskLevel.LOW,
        "Indoor environment is ideal for crowned tracking.",
    )


def assess_belt_speed(speed_fpm: float) -> TrackingRiskFactor:
    name = "Belt Speed"
    speed = format_number(speed_fpm)
    if speed_fpm <= SPEED_MEDIUM_THRESHOLD:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.LOW,
            f"Belt speed of {speed} FPM is low. Crowned tracking is suitable.",
        )
    if speed_fpm <= SPEED_HIGH_THRESHOLD:
        return TrackingRiskFactor(
            name,
            TrackingRiskLevel.MEDIUM,
            f"Belt speed of {speed} FPM is moderate. Tracking adjustment may be needed.",
        )
    return TrackingRiskFactor(
        name,
        TrackingRiskLevel.HIGH,
        f"Belt speed of {speed} FPM is high. V-guided tracking provides better stability.",
    )


def overall_risk(factors: list[TrackingRiskFactor]) -> TrackingRiskLevel:
    high = sum(1 for factor in factors if factor.risk == TrackingRiskLevel.HIGH)
    medium = sum(1 for factor in factors if factor.risk == TrackingRiskLevel.MEDIUM)
    if high >= 1 or medium >= MEDIUM_FACTORS_FOR_HIGH:
        return TrackingRiskLevel.HIGH
    if medium == 1:
        return TrackingRiskLevel.MEDIUM
    return TrackingRiskLevel.LOW


def assess(inputs: ConveyorInputs) -> TrackingGuidance:
    """Assess belt tracking risk for a configuration.

    Args:
        inputs: Canonical configuration inputs.

    Returns:
        TrackingGuidance with recommendation, risk level, factors,
        warnings and notes.
    """
    factors = [
        assess_length_width_ratio(inputs.conveyor_length_cc_in, inputs.belt_width_in),
        assess_direction_mode(inputs.direction_mode),
        assess_side_loading(inputs.side_loading_direction, inputs.side_loading_severity),
        assess_accumulation(inputs.start_stop_application, inputs.cycle_time_seconds),
        assess_environment(inputs.environment_factors),
        assess_belt_speed(inputs.belt_speed_fpm),
    ]
    risk_level = overall_risk(factors)
    if risk_level == TrackingRiskLevel.LOW:
        recommendation = BeltTrackingMethod.CROWNED
    else:
        recommendation = BeltTrackingMethod.V_GUIDED

    crowned = inputs.belt_tracking_method == BeltTrackingMethod.CROWNED
    ratio = length_width_ratio(inputs.conveyor_length_cc_in, inputs.belt_width_in)

    warnings: list[str] = []
    if crowned and inputs.direction_mode == DirectionMode.REVERSING:
        warnings.append(
            "Reversing operation with crowned tracking may cause belt mis-tracking. "
            "V-guided is strongly recommended."
        )
    if crowned and ratio > LW_RATIO_HIGH_THRESHOLD:
        warnings.append(
            f"High length-to-width ratio ({ratio:.1f}:1) with crowned tracking "
            "increases mis-tracking risk."
        )
    if crowned and ratio < LW_RATIO_TOO_LOW_THRESHOLD:
        warnings.append(
            f"Low length-to-width ratio ({ratio:.1f}:1) with crowned tracking "
            "increases mis-tracking risk. Consider V-guided tracking."
        )
    if (
        crowned
        and inputs.side_loading_direction != SideLoadingDirection.NONE
        and inputs.side_loading_severity == SideLoadingSeverity.HEAVY
    ):
        warnings.append("Heavy side loading with crowned tracking will likely cause belt wander.")

    notes: list[str] = []
    if recommendation == BeltTrackingMethod.CROWNED:
        notes.append("Crowned pulleys are cost-effective and suitable for this application.")
        if inputs.belt_width_in < NARROW_BELT_WIDTH_IN:
            notes.append("Narrow belts may require more frequent tracking adjustment.")
    else:
        notes.append(
            "V-guided tracking provides positive belt control for demanding applications."
        )
        notes.append("V-guide adds belt cost but reduces maintenance and downtime.")
        if crowned:
            notes.append(
                "Current selection: Crowned. Consider switching to V-guided for better reliability."
            )

    logger.debug(
        f"Tracking risk {risk_level.value}: "
        + ", ".join(f"{factor.name}={factor.risk.value}" for factor in factors)
    )

    return TrackingGuidance(
        recommendation=recommendation,
        risk_level=risk_level,
        summary=SUMMARIES[risk_level],
        factors=factors,
        warnings=warnings,
        notes=notes,
    )


def tracking_tooltip(inputs: ConveyorInputs) -> str:
    """Short tooltip naming the factors behind the recommendation."""
    guidance = assess(inputs)
    high = [factor.name.lower() for factor in guidance.factors_at(TrackingRiskLevel.HIGH)]
    if high:
        return f"V-guided recommended due to: {', '.join(high)}"
    medium = [factor.name.lower() for factor in guidance.factors_at(TrackingRiskLevel.MEDIUM)]
    if medium:
        return f"Consider V-guided due to: {', '.join(medium)}"
    return SUMMARIES[TrackingRiskLevel.LOW]


def is_tracking_selection_optimal(inputs: ConveyorInputs) -> bool:
    return inputs.belt_tracking_method == assess(inputs).recommendation


def format_number(value: float) -> str:
    """Render a number without a trailing .0 for whole values."""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
