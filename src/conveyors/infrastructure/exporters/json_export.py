"""JSON exporters for calculation results, tracking guidance and BOMs.

Non-finite floats (the inf/nan a degenerate configuration produces) are
written as null so the output is strict JSON.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from enum import Enum
from typing import Any

from conveyors.application.dtos import BomOutput
from conveyors.application.engine import CalculationResult
from conveyors.domain.services.bom import BomComponent
from conveyors.domain.services.tracking import TrackingGuidance


def _strict(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _strict(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_strict(v) for v in value]
    return value


class JsonExporter:
    """Exports engine artifacts as JSON strings."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export_result(self, result: CalculationResult) -> str:
        return self._dumps(result.to_dict())

    def export_tracking(self, guidance: TrackingGuidance) -> str:
        return self._dumps(asdict(guidance))

    def export_bom(self, output: BomOutput) -> str:
        resolution = output.resolution
        data = {
            "model_type": resolution.model_type,
            "parsed": asdict(resolution.parsed) if resolution.parsed is not None else None,
            "complete": resolution.complete,
            "had_multiple_matches": resolution.had_multiple_matches,
            "components": [self._format_component(c) for c in resolution.components],
            "applied_sf": output.applied_sf,
            "catalog_sf": output.catalog_sf,
            "catalog_page": output.catalog_page,
        }
        return self._dumps(data)

    def _format_component(self, component: BomComponent) -> dict[str, Any]:
        return {
            "component_type": component.component_type.value,
            "state": type(component.outcome).__name__.lower(),
            "part_number": component.part_number,
            "description": component.description,
            "found": component.found,
            "required": component.required,
            "had_multiple_matches": component.had_multiple_matches,
        }

    def _dumps(self, data: Any) -> str:
        return json.dumps(_strict(data), indent=self.indent)
