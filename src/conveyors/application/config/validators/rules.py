"""Application rules that cross-reference several input fields.

Rules live in an ordered table. Each rule names the field it reports on,
its severity, and the product capability it needs (if any); the validator
filters the table for the active product instead of branching inside rule
bodies. Rule messages are rendered with the product's display name, but
whether a rule fires never depends on the product unless the rule
declares a capability.

Incline bands are mutually exclusive: (20, 35] warns, (35, 45] warns with
stronger wording, and anything above 45 degrees is a blocking error.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from conveyors.application.config.products import PREMIUM_FLAGS
from conveyors.domain.services.formulas import calculate_premium_flags, resolve_pulley_diameters
from conveyors.domain.services.tracking import format_number
from conveyors.domain.value_objects import (
    EndGuards,
    FluidType,
    LacingStyle,
    PartTemperatureClass,
    Severity,
    SideLoadingDirection,
    SideLoadingSeverity,
)

from .base import ValidationMessage, ValidationResult

if TYPE_CHECKING:
    from conveyors.application.config.products import ProductProfile
    from conveyors.domain.entities import CalculationParameters, ConveyorInputs

logger = logging.getLogger(__name__)

LONG_CONVEYOR_THRESHOLD_IN = 120.0
HIGH_DROP_THRESHOLD_IN = 24.0
INCLINE_WARNING_DEG = 20.0
INCLINE_STRONG_WARNING_DEG = 35.0
INCLINE_LIMIT_DEG = 45.0
SHORT_CYCLE_SECONDS = 10.0

RuleCheck = Callable[["ConveyorInputs", "ProductProfile"], list[str]]


@dataclass(frozen=True)
class DomainRule:
    """One entry of the application rule table.

    Attributes:
        name: Stable rule identifier.
        field: Input field findings are reported on.
        severity: Severity of every finding this rule produces.
        check: Returns zero or more rendered messages.
        requires: Capability the product must have for the rule to apply.
    """

    name: str
    field: str
    severity: Severity
    check: RuleCheck
    requires: str | None = None

    def applies_to(self, product: ProductProfile) -> bool:
        return self.requires is None or product.has(self.requires)

    def evaluate(self, inputs: ConveyorInputs, product: ProductProfile) -> list[ValidationMessage]:
        return [
            ValidationMessage(self.field, message, self.severity)
            for message in self.check(inputs, product)
        ]


def incline_band(incline_deg: float) -> int:
    """Incline band: 0 none, 1 above 20, 2 above 35, 3 above 45 degrees.

    Lower bounds are exclusive and upper bounds inclusive, so 20.0 is band
    0 and 20.0001 is band 1.
    """
    if not math.isfinite(incline_deg):
        return 0
    if incline_deg > INCLINE_LIMIT_DEG:
        return 3
    if incline_deg > INCLINE_STRONG_WARNING_DEG:
        return 2
    if incline_deg > INCLINE_WARNING_DEG:
        return 1
    return 0


# --- Rule checks ---


def _red_hot_part(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.part_temperature_class == PartTemperatureClass.RED_HOT:
        return [f"Do not use {product.display_name} for red hot parts"]
    return []


def _considerable_fluid(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.fluid_type == FluidType.CONSIDERABLE_OIL_LIQUID:
        return ["Consider ribbed or specialty belt"]
    return []


def _long_conveyor(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.conveyor_length_cc_in > LONG_CONVEYOR_THRESHOLD_IN:
        return ["Consider multi-section body"]
    return []


def _hot_part(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.part_temperature_class == PartTemperatureClass.HOT:
        return ["Consider high-temperature belt"]
    return []


def _minimal_fluid(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.fluid_type == FluidType.MINIMAL_RESIDUAL_OIL:
        return ["Minimal residual oil present"]
    return []


def _high_drop(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.drop_height_in >= HIGH_DROP_THRESHOLD_IN:
        return ["Drop height is high. Consider impact or wear protection."]
    return []


def _incline_limit(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if incline_band(inputs.conveyor_incline_deg) == 3:
        return [
            f"Incline exceeds 45°. {product.title_name} without positive engagement "
            "is not supported by this model."
        ]
    return []


def _incline_strong_warning(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if incline_band(inputs.conveyor_incline_deg) == 2:
        return [
            "Incline exceeds 35°. Product retention by friction alone is unlikely. "
            "Cleats or positive engagement features are required for reliable operation."
        ]
    return []


def _incline_warning(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if incline_band(inputs.conveyor_incline_deg) == 1:
        return [
            "Incline exceeds 20°. Product retention by friction alone may be insufficient. "
            "Cleats or other retention features are typically required at this angle."
        ]
    return []


def _finger_safe_guards(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.finger_safe and inputs.end_guards == EndGuards.NONE:
        return ["Finger safety may require end guards depending on layout."]
    return []


def _finger_safe_covers(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.finger_safe and not inputs.bottom_covers:
        return ["Bottom covers may be required to achieve finger-safe access underneath."]
    return []


def _clipper_lacing(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.lacing_style == LacingStyle.CLIPPER_LACING:
        return ["Clipper lacing may interfere with end guards due to protrusion."]
    return []


def _belt_minimum_pulley(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if not inputs.belt_catalog_key:
        return []
    v_guided = inputs.is_v_guided
    minimum = (
        inputs.belt_min_pulley_dia_with_vguide_in
        if v_guided
        else inputs.belt_min_pulley_dia_no_vguide_in
    )
    drive_diameter, _ = resolve_pulley_diameters(inputs)
    if minimum is None or not drive_diameter < minimum:
        return []
    tracking = "V-guided" if v_guided else "crowned"
    return [
        f'Pulley diameter ({format_number(drive_diameter)}") is below the belt minimum '
        f'({format_number(minimum)}" for {tracking} tracking). '
        "Increase pulley diameter or select a different belt."
    ]


def _short_cycle(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if (
        inputs.start_stop_application
        and inputs.cycle_time_seconds is not None
        and inputs.cycle_time_seconds < SHORT_CYCLE_SECONDS
    ):
        return ["Frequent start/stop applications may require a higher-duty gearbox."]
    return []


def _side_loading(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    if inputs.side_loading_direction == SideLoadingDirection.NONE or inputs.is_v_guided:
        return []
    if inputs.side_loading_severity == SideLoadingSeverity.HEAVY:
        return ["Heavy side loading typically requires a V-guide for reliable tracking."]
    if inputs.side_loading_severity == SideLoadingSeverity.MODERATE:
        return ["Moderate side loading may require a V-guide for reliable tracking."]
    return []


def _premium_features(inputs: ConveyorInputs, product: ProductProfile) -> list[str]:
    return [f"Premium feature: {reason}" for reason in calculate_premium_flags(inputs).reasons]


DOMAIN_RULES: tuple[DomainRule, ...] = (
    DomainRule("red_hot_part", "part_temperature_class", Severity.ERROR, _red_hot_part),
    DomainRule("considerable_fluid", "fluid_type", Severity.WARNING, _considerable_fluid),
    DomainRule("long_conveyor", "conveyor_length_cc_in", Severity.WARNING, _long_conveyor),
    DomainRule("hot_part", "part_temperature_class", Severity.WARNING, _hot_part),
    DomainRule("minimal_fluid", "fluid_type", Severity.INFO, _minimal_fluid),
    DomainRule("high_drop", "drop_height_in", Severity.WARNING, _high_drop),
    DomainRule("incline_limit", "conveyor_incline_deg", Severity.ERROR, _incline_limit),
    DomainRule(
        "incline_strong_warning", "conveyor_incline_deg", Severity.WARNING, _incline_strong_warning
    ),
    DomainRule("incline_warning", "conveyor_incline_deg", Severity.WARNING, _incline_warning),
    DomainRule("finger_safe_guards", "end_guards", Severity.WARNING, _finger_safe_guards),
    DomainRule("finger_safe_covers", "bottom_covers", Severity.WARNING, _finger_safe_covers),
    DomainRule("clipper_lacing", "lacing_style", Severity.WARNING, _clipper_lacing),
    DomainRule("belt_minimum_pulley", "pulley_diameter_in", Severity.ERROR, _belt_minimum_pulley),
    DomainRule("short_cycle", "cycle_time_seconds", Severity.WARNING, _short_cycle),
    DomainRule("side_loading", "side_loading_severity", Severity.WARNING, _side_loading),
    DomainRule(
        "premium_features", "premium", Severity.INFO, _premium_features, requires=PREMIUM_FLAGS
    ),
)


class DomainRulesValidator:
    """Runs the application rule table for the active product."""

    def __init__(self, rules: tuple[DomainRule, ...] = DOMAIN_RULES) -> None:
        self.rules = rules

    @property
    def name(self) -> str:
        """Return the validator name."""
        return "domain_rules"

    def validate(
        self,
        inputs: ConveyorInputs,
        parameters: CalculationParameters,
        product: ProductProfile,
    ) -> ValidationResult:
        """Evaluate every applicable rule in table order.

        Args:
            inputs: Canonical configuration inputs.
            parameters: Unused by the current rule table.
            product: Active product profile; filters gated rules and
                supplies the product name for messages.

        Returns:
            ValidationResult with errors, warnings and info notes.
        """
        result = ValidationResult()
        for rule in self.rules:
            if not rule.applies_to(product):
                continue
            for message in rule.evaluate(inputs, product):
                result.add(message)
        logger.debug(
            f"Domain rules for {product.key}: "
            f"{len(result.errors)} error(s), {len(result.warnings)} advisory finding(s)"
        )
        return result
