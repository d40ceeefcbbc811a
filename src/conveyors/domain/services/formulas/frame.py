"""Frame height, return rollers and frame cost flags."""

from __future__ import annotations

import math
from dataclasses import dataclass

from conveyors.domain.value_objects import FrameHeightMode

from .constants import (
    FRAME_DESIGN_REVIEW_THRESHOLD_IN,
    FRAME_LOW_PROFILE_OFFSET_IN,
    FRAME_STANDARD_OFFSET_IN,
    GRAVITY_ROLLER_SPACING_IN,
    MIN_GRAVITY_ROLLERS,
    SNUB_ROLLER_CLEARANCE_THRESHOLD_IN,
    SNUB_ROLLER_QUANTITY,
)


@dataclass(frozen=True)
class FrameCostFlags:
    """Frame options that affect the quote.

    Attributes:
        low_profile: Low profile frame selected.
        custom_frame: Custom frame height selected.
        snub_rollers: Snub rollers are required.
        design_review: Frame height is under the design review threshold.
    """

    low_profile: bool
    custom_frame: bool
    snub_rollers: bool
    design_review: bool


def calculate_effective_frame_height(
    mode: FrameHeightMode,
    drive_pulley_diameter_in: float,
    custom_frame_height_in: float | None = None,
) -> float:
    """Frame height for a mode.

    Standard is the drive pulley plus 2.5", low profile the drive pulley
    plus 0.5". Custom uses the given height, or standard when none is given.
    """
    if mode == FrameHeightMode.CUSTOM and custom_frame_height_in is not None:
        return custom_frame_height_in
    if mode == FrameHeightMode.LOW_PROFILE:
        return drive_pulley_diameter_in + FRAME_LOW_PROFILE_OFFSET_IN
    return drive_pulley_diameter_in + FRAME_STANDARD_OFFSET_IN


def calculate_requires_snub_rollers(
    frame_height_in: float,
    drive_pulley_diameter_in: float,
    tail_pulley_diameter_in: float,
) -> bool:
    """Snubs are needed when the frame clears the largest pulley by less than 2.5"."""
    largest = max(drive_pulley_diameter_in, tail_pulley_diameter_in)
    return frame_height_in < largest + SNUB_ROLLER_CLEARANCE_THRESHOLD_IN


def calculate_snub_roller_quantity(requires_snub_rollers: bool) -> int:
    return SNUB_ROLLER_QUANTITY if requires_snub_rollers else 0


def calculate_gravity_roller_quantity(
    conveyor_length_cc_in: float, requires_snub_rollers: bool
) -> int:
    """Return-side gravity rollers at 60" spacing.

    Snub rollers take over the two end positions. Without snubs at least
    two gravity rollers are fitted.
    """
    if not math.isfinite(conveyor_length_cc_in) or conveyor_length_cc_in <= 0:
        return 0
    positions = math.floor(conveyor_length_cc_in / GRAVITY_ROLLER_SPACING_IN) + 1
    if requires_snub_rollers:
        return max(positions - 2, 0)
    return max(positions, MIN_GRAVITY_ROLLERS)


def calculate_frame_cost_flags(
    mode: FrameHeightMode, frame_height_in: float, requires_snub_rollers: bool
) -> FrameCostFlags:
    return FrameCostFlags(
        low_profile=mode == FrameHeightMode.LOW_PROFILE,
        custom_frame=mode == FrameHeightMode.CUSTOM,
        snub_rollers=requires_snub_rollers,
        design_review=frame_height_in < FRAME_DESIGN_REVIEW_THRESHOLD_IN,
    )
