"""Calculation parameter override schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParameterOverridesConfig(BaseModel):
    """Per-request overrides of the product family's default parameters.

    Every field is optional; unset fields keep the default. Unknown keys
    are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    friction_coeff: float | None = None
    safety_factor: float | None = None
    starting_belt_pull_lb: float | None = None
    motor_rpm: float | None = None
    gravity_in_per_s2: float | None = None
    piw_2p5: float | None = None
    piw_other: float | None = None
    pil_2p5: float | None = None
    pil_other: float | None = None
    friction_coeff_slider_bed: float | None = None
    friction_coeff_roller_bed: float | None = None
    pulley_face_extra_v_guided_in: float | None = None
    pulley_face_extra_crowned_in: float | None = None
