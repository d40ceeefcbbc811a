"""Tests for gearmotor model code parsing and part number checks."""

from __future__ import annotations

import pytest

from conveyors.domain.services.bom import (
    ParsedDrivetrain,
    is_real_part_number,
    missing_hint,
    needs_output_shaft_kit,
    normalize_ratio,
    parse_hollow_shaft_bore,
    parse_model_type,
    ratios_match,
)
from conveyors.domain.value_objects import ComponentType, GearmotorMountingStyle


class TestParseModelType:
    """Model codes decompose into size, adapter and motor frame."""

    def test_single_stage(self) -> None:
        """The common single stage code."""
        assert parse_model_type("SK 1SI31 - 56C - 63S/4") == ParsedDrivetrain(
            worm_stages=1,
            gear_unit_size="SI31",
            size_code="31",
            adapter_code="56C",
            motor_frame="63S/4",
        )

    def test_stage_count_defaults_to_one(self) -> None:
        """Codes without a stage digit are single stage."""
        parsed = parse_model_type("SK SI63 - 56C - 80S/4")

        assert parsed is not None
        assert parsed.worm_stages == 1
        assert parsed.gear_unit_size == "SI63"

    def test_two_stage(self) -> None:
        """A leading 2 is a two stage unit."""
        parsed = parse_model_type("SK 2SI50 - 140TC - 90L/4")

        assert parsed is not None
        assert parsed.worm_stages == 2
        assert parsed.adapter_code == "140TC"
        assert parsed.motor_frame == "90L/4"

    def test_size_suffix(self) -> None:
        """Size suffixes fall through to the lenient pattern."""
        parsed = parse_model_type("SK 1SI63/H10 - 56C - 63L/4")

        assert parsed is not None
        assert parsed.gear_unit_size == "SI63"
        assert parsed.motor_frame == "63L/4"

    def test_extra_whitespace(self) -> None:
        """Runs of whitespace are collapsed."""
        parsed = parse_model_type("SK   1SI63   -  56C  -   63L/4")

        assert parsed is not None
        assert parsed.adapter_code == "56C"

    @pytest.mark.parametrize("model_type", [None, "", "garbage", "SK 1SI63"])
    def test_unparseable(self, model_type: str | None) -> None:
        """Incomplete codes give None, never a partial descriptor."""
        assert parse_model_type(model_type) is None


class TestPartNumbers:
    """Only vendor-orderable numbers are authentic."""

    @pytest.mark.parametrize("part_number", ["60691130", "33120010"])
    def test_real(self, part_number: str) -> None:
        """Eight digits starting with 3 or 6."""
        assert is_real_part_number(part_number)

    @pytest.mark.parametrize(
        "part_number", [None, "", "SI63-0.25HP", "SI63-80-INCH", "12345678", "6069113", "606911300"]
    )
    def test_not_real(self, part_number: str | None) -> None:
        """Placeholders and malformed numbers are rejected."""
        assert not is_real_part_number(part_number)


class TestRatios:
    """Ratio comparison tolerates float drift."""

    def test_normalize(self) -> None:
        """Ratios round to one decimal."""
        assert normalize_ratio(79.96) == 80.0

    def test_match_string_catalog_value(self) -> None:
        """Catalog values may be strings."""
        assert ratios_match(80, "80.0")

    def test_no_match(self) -> None:
        """Different ratios do not match."""
        assert not ratios_match(80, 60)

    @pytest.mark.parametrize("ratio", [80.0, 79.9999, 79.96, 12.25, 0.05, 7.5, 1e6])
    def test_normalize_is_idempotent(self, ratio: float) -> None:
        once = normalize_ratio(ratio)
        assert normalize_ratio(once) == once

    @pytest.mark.parametrize("catalog", [80, 80.0, "80", "80.0"])
    def test_drifted_pair_matches_same_row(self, catalog) -> None:
        """80.0 and 79.9999 both match one catalog ratio."""
        assert ratios_match(80.0, catalog)
        assert ratios_match(79.9999, catalog)

    @pytest.mark.parametrize("catalog", [None, "abc"])
    def test_unusable_catalog_value(self, catalog) -> None:
        """Missing or non-numeric values never match."""
        assert not ratios_match(80, catalog)


class TestHollowShaftBore:
    """Native bore read from descriptions."""

    def test_inch_bore(self) -> None:
        """Inch bores come before the words Hollow Shaft."""
        bore = parse_hollow_shaft_bore("NORD FLEXBLOC SI63 Gear Unit i=80 1.4375 in Hollow Shaft")

        assert bore.is_hollow_shaft
        assert bore.primary_unit == "inch"
        assert bore.inch_bore_in == 1.4375
        assert bore.metric_bore_mm is None

    def test_metric_bore(self) -> None:
        """Metric bores follow the words Hollow Shaft; the ratio is not a bore."""
        bore = parse_hollow_shaft_bore("NORD FLEXBLOC SI63 Gear Unit i=80 Hollow Shaft 30 mm")

        assert bore.primary_unit == "metric"
        assert bore.metric_bore_mm == 30.0
        assert bore.inch_bore_in is None

    def test_hollow_without_size(self) -> None:
        """A hollow shaft with no size has no primary unit."""
        bore = parse_hollow_shaft_bore("SI63 Hollow Shaft")

        assert bore.is_hollow_shaft
        assert bore.primary_unit is None

    @pytest.mark.parametrize("description", [None, "SI63 Solid Shaft"])
    def test_not_hollow(self, description: str | None) -> None:
        """Other descriptions are not hollow shafts."""
        assert not parse_hollow_shaft_bore(description).is_hollow_shaft


class TestHints:
    """Mounting rules and missing hints."""

    def test_kit_needed_for_bottom_mount_only(self) -> None:
        """Only chain-coupled drives need an output shaft kit."""
        assert needs_output_shaft_kit(GearmotorMountingStyle.BOTTOM_MOUNT)
        assert not needs_output_shaft_kit(GearmotorMountingStyle.SHAFT_MOUNTED)

    def test_hints(self) -> None:
        """Each component type has its own hint."""
        assert missing_hint(ComponentType.OUTPUT_SHAFT_KIT) == (
            "Select an output shaft option to resolve this."
        )
        assert missing_hint(ComponentType.OUTPUT_SHAFT_KIT, required=False) == (
            "Not required for shaft mount configuration."
        )
        assert missing_hint(ComponentType.GEAR_UNIT) == (
            "Gear unit PN mapping not keyed for this model yet."
        )
        assert missing_hint(ComponentType.MOTOR) == (
            "No matching component found in component map."
        )
