"""Legacy field normalization.

Older saved configurations use field names that have since been renamed.
These are rewritten to canonical names before schema validation so that
every rule and formula reads canonical fields only.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Legacy name -> canonical name. The canonical value wins when both exist.
LEGACY_INPUT_ALIASES: dict[str, str] = {
    "conveyor_width_in": "belt_width_in",
}


def normalize_inputs(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of raw inputs with legacy aliases resolved.

    Args:
        raw: Input mapping, possibly using legacy field names.

    Returns:
        New dict with only canonical field names. The input is not modified.
    """
    normalized = dict(raw)
    for legacy, canonical in LEGACY_INPUT_ALIASES.items():
        if legacy not in normalized:
            continue
        value = normalized.pop(legacy)
        if normalized.get(canonical) is None:
            normalized[canonical] = value
            logger.debug(f"Normalized legacy field '{legacy}' to '{canonical}'")
    return normalized


def normalize_configuration(data: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize the inputs section of a whole configuration document."""
    normalized = dict(data)
    inputs = normalized.get("inputs")
    if isinstance(inputs, Mapping):
        normalized["inputs"] = normalize_inputs(inputs)
    return normalized
