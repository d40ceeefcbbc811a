"""Gearmotor bill-of-materials resolution.

This module provides:
- Model code parsing into a drivetrain descriptor
- Vendor part number authenticity and ratio normalisation helpers
- Ordered output shaft kit lookup tiers
- The async BomResolver with a four-state outcome per component
"""

from __future__ import annotations

from .constants import (
    COMPONENT_LABELS,
    DEFAULT_MOUNTING_VARIANT,
    OUTPUT_SHAFT_OPTION_LABELS,
    VENDOR_NORD,
)
from .lookups import (
    SHAFT_KIT_TIERS,
    DiameterKeyedTier,
    LookupMatch,
    SizeOnlyTier,
    StyleKeyedTier,
    find_output_shaft_kit,
    pick_authentic,
)
from .models import (
    BomComponent,
    BomContext,
    BomResolution,
    ComponentOutcome,
    Configured,
    HollowShaftBore,
    Missing,
    NotRequired,
    ParsedDrivetrain,
    Resolved,
)
from .parser import (
    is_real_part_number,
    missing_hint,
    needs_output_shaft_kit,
    normalize_ratio,
    parse_hollow_shaft_bore,
    parse_model_type,
    ratios_match,
)
from .resolver import BomResolver

__all__ = [
    # Constants
    "COMPONENT_LABELS",
    "DEFAULT_MOUNTING_VARIANT",
    "OUTPUT_SHAFT_OPTION_LABELS",
    "VENDOR_NORD",
    # Models
    "BomComponent",
    "BomContext",
    "BomResolution",
    "ComponentOutcome",
    "Configured",
    "HollowShaftBore",
    "Missing",
    "NotRequired",
    "ParsedDrivetrain",
    "Resolved",
    # Parsing
    "is_real_part_number",
    "missing_hint",
    "needs_output_shaft_kit",
    "normalize_ratio",
    "parse_hollow_shaft_bore",
    "parse_model_type",
    "ratios_match",
    # Lookups
    "SHAFT_KIT_TIERS",
    "DiameterKeyedTier",
    "LookupMatch",
    "SizeOnlyTier",
    "StyleKeyedTier",
    "find_output_shaft_kit",
    "pick_authentic",
    # Resolver
    "BomResolver",
]
