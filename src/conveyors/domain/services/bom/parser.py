"""Model code parsing and part number checks for the BOM resolver.

Parsing is total: a model code either yields a complete ParsedDrivetrain or
None, never a partially filled descriptor.
"""

from __future__ import annotations

import re

from conveyors.domain.value_objects import ComponentType, GearmotorMountingStyle

from .constants import PART_NUMBER_PATTERN, RATIO_DECIMALS
from .models import HollowShaftBore, ParsedDrivetrain

# "SK 1SI31 - 56C - 63S/4", "SK SI63 - 56C - 80S/4"
_MODEL_PATTERN = re.compile(r"SK\s*(\d)?SI(\d+)\s*-\s*(\w+)\s*-\s*(\S+)", re.IGNORECASE)
# Size suffixes and codes without the SK prefix: "SK 1SI63/H10 - 56C - 63L/4"
_MODEL_FALLBACK_PATTERN = re.compile(r"(\d)?SI(\d+).*?-\s*(\w+)\s*-\s*(\S+)", re.IGNORECASE)
_PART_NUMBER = re.compile(PART_NUMBER_PATTERN)
_INCH_BORE = re.compile(r"(\d+(?:\.\d+)?)\s*(?:in(?:ch)?\.?|\")\s*hollow\s+shaft", re.IGNORECASE)
_METRIC_BORE = re.compile(r"hollow\s+shaft\s+(\d+(?:\.\d+)?)\s*mm", re.IGNORECASE)


def parse_model_type(model_type: str | None) -> ParsedDrivetrain | None:
    """Parse a gearmotor model code into its drivetrain descriptor.

    Args:
        model_type: Model code such as "SK 1SI31 - 56C - 63S/4".

    Returns:
        ParsedDrivetrain, or None when the code cannot be fully parsed.
    """
    if not model_type:
        return None

    normalized = " ".join(model_type.split())
    match = _MODEL_PATTERN.search(normalized) or _MODEL_FALLBACK_PATTERN.search(normalized)
    if match is None:
        return None

    stages, size, adapter, frame = match.groups()
    return ParsedDrivetrain(
        worm_stages=int(stages or "1"),
        gear_unit_size=f"SI{size}",
        size_code=size,
        adapter_code=adapter,
        motor_frame=frame,
    )


def is_real_part_number(part_number: str | None) -> bool:
    """Whether a part number is a vendor-orderable NORD number.

    Internal placeholder keys such as "SI63-0.25HP" never pass.
    """
    if not part_number:
        return False
    return _PART_NUMBER.match(part_number) is not None


def normalize_ratio(ratio: float) -> float:
    """Round a gear ratio so floating point drift compares equal."""
    return round(float(ratio), RATIO_DECIMALS)


def ratios_match(requested: float, catalog: float | str | None) -> bool:
    if catalog is None:
        return False
    try:
        return normalize_ratio(requested) == normalize_ratio(float(catalog))
    except (TypeError, ValueError):
        return False


def parse_hollow_shaft_bore(description: str | None) -> HollowShaftBore:
    """Read the native hollow shaft bore from a gear unit description.

    Args:
        description: Vendor description, e.g.
            "NORD FLEXBLOC SI63 Gear Unit i=80 1.4375 in Hollow Shaft".

    Returns:
        HollowShaftBore. Descriptions without "Hollow Shaft" report
        is_hollow_shaft=False and no bore.
    """
    if not description or not re.search(r"hollow\s+shaft", description, re.IGNORECASE):
        return HollowShaftBore(is_hollow_shaft=False)

    inch = _INCH_BORE.search(description)
    metric = _METRIC_BORE.search(description)
    inch_bore = float(inch.group(1)) if inch else None
    metric_bore = float(metric.group(1)) if metric else None

    if inch_bore is not None:
        primary_unit = "inch"
    elif metric_bore is not None:
        primary_unit = "metric"
    else:
        primary_unit = None

    return HollowShaftBore(
        is_hollow_shaft=True,
        primary_unit=primary_unit,
        inch_bore_in=inch_bore,
        metric_bore_mm=metric_bore,
    )


def needs_output_shaft_kit(mounting_style: GearmotorMountingStyle) -> bool:
    """Chain-coupled bottom mounts need a kit; shaft mounts do not."""
    return mounting_style == GearmotorMountingStyle.BOTTOM_MOUNT


def missing_hint(component_type: ComponentType, required: bool = True) -> str:
    """Human-readable reason a component has no orderable part number."""
    match component_type:
        case ComponentType.OUTPUT_SHAFT_KIT if required:
            return "Select an output shaft option to resolve this."
        case ComponentType.OUTPUT_SHAFT_KIT:
            return "Not required for shaft mount configuration."
        case ComponentType.GEAR_UNIT:
            return "Gear unit PN mapping not keyed for this model yet."
        case _:
            return "No matching component found in component map."
