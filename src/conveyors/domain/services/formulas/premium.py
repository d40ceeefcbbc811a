"""Premium feature detection for the belt conveyor product family."""

from __future__ import annotations

from dataclasses import dataclass, field

from conveyors.domain.entities import ConveyorInputs
from conveyors.domain.value_objects import BedType, PremiumLevel

ROLLER_BED_REASON = "Roller bed construction"
V_GUIDED_REASON = "V-guided belt tracking"


@dataclass(frozen=True)
class PremiumFlags:
    """Premium features present in a configuration.

    Attributes:
        is_premium: At least one premium feature is selected.
        level: standard, premium (one feature) or premium_plus (two or more).
        reasons: Human-readable reason per premium feature, in fixed order.
    """

    is_premium: bool
    level: PremiumLevel
    reasons: list[str] = field(default_factory=list)


def calculate_premium_flags(inputs: ConveyorInputs) -> PremiumFlags:
    reasons: list[str] = []
    if inputs.bed_type == BedType.ROLLER_BED:
        reasons.append(ROLLER_BED_REASON)
    if inputs.is_v_guided:
        reasons.append(V_GUIDED_REASON)

    if len(reasons) >= 2:
        level = PremiumLevel.PREMIUM_PLUS
    elif reasons:
        level = PremiumLevel.PREMIUM
    else:
        level = PremiumLevel.STANDARD

    return PremiumFlags(is_premium=bool(reasons), level=level, reasons=reasons)
