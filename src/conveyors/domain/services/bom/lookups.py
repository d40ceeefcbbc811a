"""Catalog lookups for gearmotor components.

Output shaft kits are looked up through an ordered list of tiers, most
specific first. Each tier either contributes filters or declares itself
not applicable, and the first tier that yields a vendor-authentic row wins.
No tier ever synthesizes a part number.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence

from conveyors.contracts.catalog import VendorCatalog, VendorComponent
from conveyors.domain.value_objects import ComponentType

from .constants import MOTOR_HP_TOLERANCE, VENDOR_NORD
from .models import BomContext, ParsedDrivetrain
from .parser import is_real_part_number, ratios_match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupMatch:
    """A vendor-authentic catalog row and whether others also matched."""

    component: VendorComponent
    had_multiple_matches: bool = False

    @property
    def part_number(self) -> str:
        return self.component.vendor_part_number


def pick_authentic(rows: Iterable[VendorComponent]) -> LookupMatch | None:
    """Pick the lowest authentic part number among candidate rows.

    Rows whose part number is an internal key are ignored. Sorting makes the
    choice deterministic regardless of catalog row order.
    """
    authentic = sorted(
        (row for row in rows if is_real_part_number(row.vendor_part_number)),
        key=lambda row: row.vendor_part_number,
    )
    if not authentic:
        return None
    return LookupMatch(component=authentic[0], had_multiple_matches=len(authentic) > 1)


# --- Shaft kit tiers ---


class ShaftKitTier(Protocol):
    """One precedence level of the output shaft kit lookup."""

    name: str

    def filters(self, parsed: ParsedDrivetrain, context: BomContext) -> dict[str, Any] | None:
        """Metadata filters for this tier, or None when it does not apply."""
        ...


def _base_filters(parsed: ParsedDrivetrain, context: BomContext) -> dict[str, Any]:
    option = context.output_shaft_option
    return {
        "gear_unit_size": parsed.gear_unit_size,
        "output_shaft_option": option.value if option is not None else None,
    }


class StyleKeyedTier:
    name = "style"

    def filters(self, parsed: ParsedDrivetrain, context: BomContext) -> dict[str, Any] | None:
        if not context.shaft_style:
            return None
        return {**_base_filters(parsed, context), "shaft_style": context.shaft_style}


class DiameterKeyedTier:
    """Deprecated diameter-keyed rows, still present in older catalogs."""

    name = "diameter"

    def filters(self, parsed: ParsedDrivetrain, context: BomContext) -> dict[str, Any] | None:
        if context.shaft_diameter_in is None:
            return None
        return {**_base_filters(parsed, context), "shaft_diameter_in": context.shaft_diameter_in}


class SizeOnlyTier:
    name = "size"

    def filters(self, parsed: ParsedDrivetrain, context: BomContext) -> dict[str, Any] | None:
        return _base_filters(parsed, context)


SHAFT_KIT_TIERS: tuple[ShaftKitTier, ...] = (StyleKeyedTier(), DiameterKeyedTier(), SizeOnlyTier())


async def find_output_shaft_kit(
    catalog: VendorCatalog,
    parsed: ParsedDrivetrain,
    context: BomContext,
    tiers: Sequence[ShaftKitTier] = SHAFT_KIT_TIERS,
) -> LookupMatch | None:
    """Try each tier in order and stop at the first authentic row."""
    for tier in tiers:
        filters = tier.filters(parsed, context)
        if filters is None:
            continue
        rows = await catalog.find_components(VENDOR_NORD, ComponentType.OUTPUT_SHAFT_KIT, filters)
        match = pick_authentic(rows)
        if match is not None:
            logger.debug(f"Shaft kit resolved by {tier.name} tier: {match.part_number}")
            return match
        logger.debug(f"Shaft kit {tier.name} tier had no authentic match for {filters}")
    return None


# --- Single-key lookups ---


async def find_gear_unit(
    catalog: VendorCatalog, parsed: ParsedDrivetrain, context: BomContext
) -> LookupMatch | None:
    """Gear unit by size and mounting variant, matched on the worm ratio."""
    if context.worm_ratio is None:
        return None
    rows = await catalog.find_components(
        VENDOR_NORD,
        ComponentType.GEAR_UNIT,
        {
            "gear_unit_size": parsed.gear_unit_size,
            "mounting_variant": context.mounting_variant.value,
        },
    )
    return pick_authentic(
        row for row in rows if ratios_match(context.worm_ratio, row.metadata.get("ratio"))
    )


async def find_motor(
    catalog: VendorCatalog, parsed: ParsedDrivetrain, motor_hp: float
) -> LookupMatch | None:
    rows = await catalog.find_components(
        VENDOR_NORD,
        ComponentType.MOTOR,
        {"adapter_code": parsed.adapter_code, "motor_frame": parsed.motor_frame},
    )
    return pick_authentic(row for row in rows if _hp_matches(row, motor_hp))


async def find_adapter(catalog: VendorCatalog, parsed: ParsedDrivetrain) -> LookupMatch | None:
    rows = await catalog.find_components(
        VENDOR_NORD, ComponentType.ADAPTER, {"adapter_code": parsed.adapter_code}
    )
    return pick_authentic(rows)


async def find_bushing(
    catalog: VendorCatalog, parsed: ParsedDrivetrain, bore_in: float
) -> LookupMatch | None:
    rows = await catalog.find_components(
        VENDOR_NORD, ComponentType.HOLLOW_SHAFT_BUSHING, {"gear_unit_size": parsed.gear_unit_size}
    )
    return pick_authentic(row for row in rows if _bore_matches(row, bore_in))


def _hp_matches(row: VendorComponent, motor_hp: float) -> bool:
    hp = row.metadata.get("motor_hp")
    if hp is None:
        return False
    try:
        return abs(float(hp) - motor_hp) < MOTOR_HP_TOLERANCE
    except (TypeError, ValueError):
        return False


def _bore_matches(row: VendorComponent, bore_in: float) -> bool:
    bore = row.metadata.get("bore_in")
    if bore is None:
        return False
    try:
        return abs(float(bore) - bore_in) < 1e-4
    except (TypeError, ValueError):
        return False
