"""Tests for the JSON exporter."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from conveyors.application.dtos import BomOutput
from conveyors.application.engine import CalculationEngine
from conveyors.domain.entities import ConveyorInputs
from conveyors.domain.services.bom import (
    BomComponent,
    BomResolution,
    Configured,
    NotRequired,
    Resolved,
    parse_model_type,
)
from conveyors.domain.services.tracking import assess
from conveyors.domain.value_objects import ComponentType, DirectionMode
from conveyors.infrastructure.exporters import JsonExporter

FIXED_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def exporter() -> JsonExporter:
    return JsonExporter()


@pytest.fixture
def engine() -> CalculationEngine:
    """Engine with a fixed clock."""
    return CalculationEngine(clock=lambda: FIXED_TIME)


class TestExportResult:
    """Calculation results as strict JSON."""

    def test_round_trips_through_json(
        self, exporter: JsonExporter, engine: CalculationEngine, baseline_inputs: ConveyorInputs
    ) -> None:
        """Every key of the result survives serialization."""
        data = json.loads(exporter.export_result(engine.run(baseline_inputs)))

        assert set(data) == {"success", "outputs", "errors", "warnings", "metadata"}
        assert data["success"] is True
        assert data["metadata"] == {
            "model_key": "belt_conveyor_v1",
            "model_version_id": "belt_conveyor_v1.12",
            "calculated_at": "2024-03-01T12:00:00+00:00",
        }

    def test_non_finite_written_as_null(
        self, exporter: JsonExporter, engine: CalculationEngine, baseline_inputs: ConveyorInputs
    ) -> None:
        """No part travel dimension leaves the pitch undefined."""
        text = exporter.export_result(engine.run(baseline_inputs))

        assert "NaN" not in text
        assert "Infinity" not in text
        assert json.loads(text)["outputs"]["pitch_in"] is None

    def test_enums_written_as_values(
        self, exporter: JsonExporter, engine: CalculationEngine, baseline_inputs: ConveyorInputs
    ) -> None:
        outputs = json.loads(exporter.export_result(engine.run(baseline_inputs)))["outputs"]

        assert outputs["speed_mode_used"] == "belt_speed"

    def test_errors_serialized(self, exporter: JsonExporter, engine: CalculationEngine) -> None:
        """Findings carry field, message and severity."""
        inputs = ConveyorInputs(conveyor_length_cc_in=120.0, belt_width_in=48.0, conveyor_incline_deg=46.0)
        data = json.loads(exporter.export_result(engine.run(inputs)))

        assert data["success"] is False
        assert data["errors"][0]["field"] == "conveyor_incline_deg"
        assert data["errors"][0]["severity"] == "error"

    def test_compact_indent(self, engine: CalculationEngine, baseline_inputs: ConveyorInputs) -> None:
        text = JsonExporter(indent=None).export_result(engine.run(baseline_inputs))

        assert "\n" not in text


class TestExportTracking:
    """Tracking guidance export."""

    def test_guidance_fields(self, exporter: JsonExporter) -> None:
        """Enums become their display values."""
        inputs = ConveyorInputs(
            conveyor_length_cc_in=240.0,
            belt_width_in=18.0,
            direction_mode=DirectionMode.REVERSING,
        )
        data = json.loads(exporter.export_tracking(assess(inputs)))

        assert data["recommendation"] == "V-guided"
        assert data["risk_level"] == "High"
        assert len(data["factors"]) == 6
        assert data["factors"][1]["name"] == "Reversing Operation"


class TestExportBom:
    """BOM export with one state per component."""

    def test_component_states(self, exporter: JsonExporter) -> None:
        model = "SK 1SI63 - 56C - 63L/4"
        resolution = BomResolution(
            model_type=model,
            parsed=parse_model_type(model),
            components=[
                BomComponent(ComponentType.GEAR_UNIT, Resolved("60691130"), "SI63 Gear Unit"),
                BomComponent(
                    ComponentType.OUTPUT_SHAFT_KIT, Configured("Metric hollow"), "Configured: Metric hollow"
                ),
                BomComponent(ComponentType.HOLLOW_SHAFT_BUSHING, NotRequired()),
            ],
        )
        data = json.loads(exporter.export_bom(BomOutput(resolution=resolution, applied_sf=1.5)))

        assert data["complete"] is False
        assert data["parsed"]["gear_unit_size"] == "SI63"
        assert data["applied_sf"] == 1.5
        assert [c["state"] for c in data["components"]] == ["resolved", "configured", "notrequired"]
        gear, kit, _ = data["components"]
        assert gear["part_number"] == "60691130"
        assert gear["found"] is True
        assert kit["part_number"] is None
        assert kit["found"] is False
        assert kit["component_type"] == "output_shaft_kit"

    def test_unparsed_model(self, exporter: JsonExporter) -> None:
        data = json.loads(
            exporter.export_bom(BomOutput(resolution=BomResolution("bogus", None, [])))
        )

        assert data["parsed"] is None
        assert data["complete"] is False
        assert data["components"] == []
