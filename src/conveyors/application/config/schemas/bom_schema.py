"""Gearmotor BOM request schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from conveyors.domain.services.bom.constants import DEFAULT_MOUNTING_VARIANT
from conveyors.domain.value_objects import (
    GearmotorMountingStyle,
    MountingVariant,
    OutputShaftOption,
)


class BomRequestConfig(BaseModel):
    """A gearmotor selection to resolve into part numbers.

    Attributes:
        model_type: Gearmotor model code, e.g. "SK 1SI63 - 56C - 63L/4".
        motor_hp: Motor horsepower.
        worm_ratio: Worm stage ratio (never the combined multi-stage ratio).
        mounting_style: Shaft mounted or chain-coupled bottom mount.
        mounting_variant: Gear unit output bore family.
        output_shaft_option: Output shaft kit option for bottom mounts.
        shaft_style: Shaft style key for the most specific kit lookup.
        shaft_diameter_in: Shaft diameter key for the older kit lookup.
        bushing_bore_in: Bore of an optional hollow shaft bushing.
        applied_sf: Service factor applied to the selection.
        catalog_sf: Service factor published in the catalog.
        catalog_page: Catalog page reference, when known.
    """

    model_config = ConfigDict(extra="forbid")

    model_type: str
    motor_hp: float = Field(..., gt=0)
    worm_ratio: float | None = Field(default=None, gt=0)
    mounting_style: GearmotorMountingStyle = GearmotorMountingStyle.SHAFT_MOUNTED
    mounting_variant: MountingVariant = DEFAULT_MOUNTING_VARIANT
    output_shaft_option: OutputShaftOption | None = None
    shaft_style: str | None = None
    shaft_diameter_in: float | None = Field(default=None, gt=0)
    bushing_bore_in: float | None = Field(default=None, gt=0)
    applied_sf: float = Field(default=1.0, gt=0)
    catalog_sf: float = Field(default=1.0, gt=0)
    catalog_page: str | None = None
