"""BOM resolution models.

Every component resolves to exactly one outcome variant. Consumers switch on
the variant with ``match`` instead of decoding a found flag and a nullable
part number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from conveyors.domain.value_objects import (
    ComponentType,
    GearmotorMountingStyle,
    MountingVariant,
    OutputShaftOption,
)

from .constants import DEFAULT_MOUNTING_VARIANT


@dataclass(frozen=True)
class ParsedDrivetrain:
    """Structured decomposition of a gearmotor model code.

    Attributes:
        worm_stages: Number of reduction stages (1 when the code omits it).
        gear_unit_size: Gear unit size key, e.g. "SI31".
        size_code: Numeric part of the size, e.g. "31".
        adapter_code: NEMA input adapter, e.g. "56C".
        motor_frame: Motor frame, e.g. "63S/4".
    """

    worm_stages: int
    gear_unit_size: str
    size_code: str
    adapter_code: str
    motor_frame: str


@dataclass(frozen=True)
class HollowShaftBore:
    """Native output bore read from a gear unit description."""

    is_hollow_shaft: bool
    primary_unit: str | None = None
    inch_bore_in: float | None = None
    metric_bore_mm: float | None = None


# --- Outcome variants ---


@dataclass(frozen=True)
class Resolved:
    """A vendor-authentic part number was found."""

    part_number: str


@dataclass(frozen=True)
class Configured:
    """A selection was made but no part number is mapped for it yet."""

    selection_label: str


@dataclass(frozen=True)
class Missing:
    """The component is required and unresolved."""


@dataclass(frozen=True)
class NotRequired:
    """The component is unnecessary for this mounting style."""


ComponentOutcome = Union[Resolved, Configured, Missing, NotRequired]


@dataclass(frozen=True)
class BomComponent:
    """One line of a gearmotor bill of materials."""

    component_type: ComponentType
    outcome: ComponentOutcome
    description: str | None = None
    had_multiple_matches: bool = False

    @property
    def part_number(self) -> str | None:
        """Orderable part number; only a Resolved outcome carries one."""
        match self.outcome:
            case Resolved(part_number=part_number):
                return part_number
            case _:
                return None

    @property
    def found(self) -> bool:
        """True for a Resolved or Not Required outcome."""
        return isinstance(self.outcome, (Resolved, NotRequired))

    @property
    def required(self) -> bool:
        return not isinstance(self.outcome, NotRequired)


@dataclass(frozen=True)
class BomContext:
    """Selections that influence component resolution.

    Attributes:
        mounting_style: Shaft mounted (direct) or bottom mount (chain coupled).
        worm_ratio: Ratio of the worm stage only. The combined ratio of a
            multi-stage unit never matches a gear unit row.
        mounting_variant: Gear unit output bore family.
        output_shaft_option: Selected output shaft kit option, if any.
        shaft_style: Style key for the most specific shaft kit lookup.
        shaft_diameter_in: Diameter key for the older shaft kit lookup.
        bushing_bore_in: Requested bushing bore; no bushing line without it.
    """

    mounting_style: GearmotorMountingStyle = GearmotorMountingStyle.SHAFT_MOUNTED
    worm_ratio: float | None = None
    mounting_variant: MountingVariant = DEFAULT_MOUNTING_VARIANT
    output_shaft_option: OutputShaftOption | None = None
    shaft_style: str | None = None
    shaft_diameter_in: float | None = None
    bushing_bore_in: float | None = None


@dataclass(frozen=True)
class BomResolution:
    """Resolution of every component for one model code."""

    model_type: str
    parsed: ParsedDrivetrain | None
    components: list[BomComponent] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True only when every component is Resolved or Not Required."""
        return bool(self.components) and all(c.found for c in self.components)

    @property
    def had_multiple_matches(self) -> bool:
        return any(c.had_multiple_matches for c in self.components)

    def component(self, component_type: ComponentType) -> BomComponent | None:
        for candidate in self.components:
            if candidate.component_type == component_type:
                return candidate
        return None
