"""Gearmotor bill-of-materials resolver.

Resolves a NORD FLEXBLOC model code into orderable part numbers for the gear
unit, motor, adapter, output shaft kit and optional hollow shaft bushing.

Each component is resolved independently. A catalog failure degrades only
the affected component to Missing or Configured; it never aborts the rest
of the BOM.
"""

from __future__ import annotations

import asyncio
import logging

from conveyors.contracts.catalog import VendorCatalog
from conveyors.domain.value_objects import ComponentType

from .constants import (
    NOT_REQUIRED_FOR_SHAFT_MOUNT,
    OUTPUT_SHAFT_OPTION_LABELS,
    REQUIRED_FOR_CHAIN_DRIVE,
    UNPARSEABLE_MODEL,
)
from .lookups import (
    LookupMatch,
    find_adapter,
    find_bushing,
    find_gear_unit,
    find_motor,
    find_output_shaft_kit,
)
from .models import (
    BomComponent,
    BomContext,
    BomResolution,
    Configured,
    Missing,
    NotRequired,
    ParsedDrivetrain,
    Resolved,
)
from .parser import needs_output_shaft_kit, parse_model_type

logger = logging.getLogger(__name__)


class BomResolver:
    """Resolve gearmotor components against a vendor catalog.

    Example:
        ```python
        resolver = BomResolver(catalog)
        bom = await resolver.resolve("SK 1SI63 - 56C - 63L/4", 0.25, context)
        ```
    """

    def __init__(self, catalog: VendorCatalog) -> None:
        self.catalog = catalog

    async def resolve(
        self,
        model_type: str | None,
        motor_hp: float,
        context: BomContext | None = None,
    ) -> BomResolution:
        """Resolve every component for a model code.

        Args:
            model_type: Gearmotor model code, e.g. "SK 1SI31 - 56C - 63S/4".
            motor_hp: Motor horsepower.
            context: Mounting and shaft selections. Defaults to a shaft
                mounted drive with no worm ratio.

        Returns:
            BomResolution with components in copy-text order.
        """
        context = context or BomContext()
        parsed = parse_model_type(model_type)
        if parsed is None:
            logger.debug(f"Unparseable model code: {model_type!r}")
            return BomResolution(
                model_type=model_type or "",
                parsed=None,
                components=[
                    BomComponent(ComponentType.GEAR_UNIT, Missing(), UNPARSEABLE_MODEL),
                    BomComponent(ComponentType.MOTOR, Missing()),
                    BomComponent(ComponentType.ADAPTER, Missing()),
                    _kit_without_model(context),
                ],
            )

        lookups = [
            self._gear_unit(parsed, motor_hp, context),
            self._motor(parsed, motor_hp),
            self._adapter(parsed),
            self._output_shaft_kit(parsed, context),
        ]
        if context.bushing_bore_in is not None:
            lookups.append(self._bushing(parsed, context.bushing_bore_in))

        components = list(await asyncio.gather(*lookups))
        resolution = BomResolution(model_type=model_type or "", parsed=parsed, components=components)
        logger.debug(
            f"BOM for {parsed.gear_unit_size} {parsed.adapter_code} {parsed.motor_frame}: "
            f"complete={resolution.complete}"
        )
        return resolution

    async def _gear_unit(
        self, parsed: ParsedDrivetrain, motor_hp: float, context: BomContext
    ) -> BomComponent:
        default = f"NORD FLEXBLOC {parsed.gear_unit_size} {motor_hp:g}HP"
        try:
            match = await find_gear_unit(self.catalog, parsed, context)
        except Exception as e:
            logger.warning(f"Gear unit lookup failed for {parsed.gear_unit_size}: {e}")
            match = None
        return _from_match(ComponentType.GEAR_UNIT, match, default)

    async def _motor(self, parsed: ParsedDrivetrain, motor_hp: float) -> BomComponent:
        default = f"{parsed.motor_frame} Motor {motor_hp:g}HP"
        try:
            match = await find_motor(self.catalog, parsed, motor_hp)
        except Exception as e:
            logger.warning(f"Motor lookup failed for {parsed.motor_frame}: {e}")
            match = None
        return _from_match(ComponentType.MOTOR, match, default)

    async def _adapter(self, parsed: ParsedDrivetrain) -> BomComponent:
        default = f"NEMA {parsed.adapter_code} Adapter"
        try:
            match = await find_adapter(self.catalog, parsed)
        except Exception as e:
            logger.warning(f"Adapter lookup failed for {parsed.adapter_code}: {e}")
            match = None
        return _from_match(ComponentType.ADAPTER, match, default)

    async def _output_shaft_kit(self, parsed: ParsedDrivetrain, context: BomContext) -> BomComponent:
        kit = ComponentType.OUTPUT_SHAFT_KIT
        if not needs_output_shaft_kit(context.mounting_style):
            return BomComponent(kit, NotRequired(), NOT_REQUIRED_FOR_SHAFT_MOUNT)

        option = context.output_shaft_option
        if option is None:
            return BomComponent(kit, Missing(), REQUIRED_FOR_CHAIN_DRIVE)

        label = OUTPUT_SHAFT_OPTION_LABELS[option]
        try:
            match = await find_output_shaft_kit(self.catalog, parsed, context)
        except Exception as e:
            logger.warning(f"Output shaft kit lookup failed for {parsed.gear_unit_size}: {e}")
            match = None

        if match is None:
            return BomComponent(kit, Configured(label), f"Configured: {label}")
        return BomComponent(
            kit,
            Resolved(match.part_number),
            match.component.description or f"Output Shaft Kit: {label}",
            had_multiple_matches=match.had_multiple_matches,
        )

    async def _bushing(self, parsed: ParsedDrivetrain, bore_in: float) -> BomComponent:
        default = f"Hollow Shaft Bushing {bore_in:g} in"
        try:
            match = await find_bushing(self.catalog, parsed, bore_in)
        except Exception as e:
            logger.warning(f"Bushing lookup failed for {parsed.gear_unit_size}: {e}")
            match = None
        return _from_match(ComponentType.HOLLOW_SHAFT_BUSHING, match, default)


def _kit_without_model(context: BomContext) -> BomComponent:
    """Output shaft kit when there is no parsed model to look one up for."""
    kit = ComponentType.OUTPUT_SHAFT_KIT
    if not needs_output_shaft_kit(context.mounting_style):
        return BomComponent(kit, NotRequired(), NOT_REQUIRED_FOR_SHAFT_MOUNT)
    return BomComponent(kit, Missing(), REQUIRED_FOR_CHAIN_DRIVE)


def _from_match(
    component_type: ComponentType, match: LookupMatch | None, default_description: str
) -> BomComponent:
    if match is None:
        return BomComponent(component_type, Missing(), default_description)
    return BomComponent(
        component_type,
        Resolved(match.part_number),
        match.component.description or default_description,
        had_multiple_matches=match.had_multiple_matches,
    )
