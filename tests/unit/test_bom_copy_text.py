"""Tests for the clipboard BOM text."""

from __future__ import annotations

import pytest

from conveyors.application.dtos import BomOutput
from conveyors.domain.services.bom import (
    BomComponent,
    BomResolution,
    Configured,
    Missing,
    NotRequired,
    Resolved,
    parse_model_type,
)
from conveyors.domain.value_objects import ComponentType
from conveyors.infrastructure.exporters import BomCopyTextFormatter, format_bom_copy_text

MODEL = "SK 1SI63 - 56C - 63L/4"


def _resolution(*components: BomComponent) -> BomResolution:
    return BomResolution(model_type=MODEL, parsed=parse_model_type(MODEL), components=list(components))


def _shaft_mount_components(**overrides: BomComponent) -> list[BomComponent]:
    components = {
        "gear": BomComponent(
            ComponentType.GEAR_UNIT, Resolved("60691130"), "NORD FLEXBLOC SI63 Gear Unit i=80"
        ),
        "motor": BomComponent(ComponentType.MOTOR, Resolved("33120010"), "63L/4 Motor 0.25HP"),
        "adapter": BomComponent(ComponentType.ADAPTER, Resolved("60395510"), "NEMA 56C Adapter"),
        "kit": BomComponent(
            ComponentType.OUTPUT_SHAFT_KIT, NotRequired(), "Not required for shaft mount"
        ),
    }
    components.update(overrides)
    return list(components.values())


@pytest.fixture
def complete_output() -> BomOutput:
    """A fully resolved shaft mounted BOM."""
    return BomOutput(
        resolution=_resolution(*_shaft_mount_components()),
        applied_sf=1.5,
        catalog_sf=1.4,
        catalog_page="B1000-63",
    )


class TestCompleteBom:
    """Layout of a fully resolved BOM."""

    def test_exact_text(self, complete_output: BomOutput) -> None:
        """Header, four numbered lines and the notes."""
        expected = "\n".join(
            [
                "NORD FLEXBLOC Gearmotor BOM",
                "Selected Model: SK 1SI63 - 56C - 63L/4",
                "Catalog Page: B1000-63",
                "",
                "1) Gear Unit: 60691130  | NORD FLEXBLOC SI63 Gear Unit i=80",
                "2) Motor (STD or BRK): 33120010  | 63L/4 Motor 0.25HP",
                "3) Adapter: 60395510  | NEMA 56C Adapter",
                "4) Output Shaft Kit: — (not required)  | Not required for shaft mount",
                "",
                "Notes:",
                "- Applied SF: 1.5",
                "- Catalog SF: 1.4",
            ]
        )

        assert format_bom_copy_text(complete_output) == expected

    def test_no_catalog_page_line(self, complete_output: BomOutput) -> None:
        """The catalog page line is omitted when unknown."""
        output = BomOutput(resolution=complete_output.resolution)
        text = BomCopyTextFormatter().format(output)

        assert "Catalog Page" not in text
        assert "- Applied SF: 1" in text

    def test_no_missing_notes(self, complete_output: BomOutput) -> None:
        """A complete BOM lists nothing as missing."""
        assert "MISSING" not in format_bom_copy_text(complete_output)


class TestUnresolvedComponents:
    """Placeholder cells and missing notes."""

    def test_configured_kit(self) -> None:
        """A configured kit is pending and never shows a part number."""
        kit = BomComponent(
            ComponentType.OUTPUT_SHAFT_KIT, Configured("Metric hollow"), "Configured: Metric hollow"
        )
        text = format_bom_copy_text(BomOutput(resolution=_resolution(*_shaft_mount_components(kit=kit))))

        assert (
            "4) Output Shaft Kit: — (PN pending, not included in order)  | Configured: Metric hollow"
            in text
        )
        assert (
            "- MISSING: Output Shaft Kit PN "
            "(Metric hollow selected; PN pending catalog verification.)" in text
        )

    def test_missing_kit(self) -> None:
        """A missing kit asks for a drive arrangement selection."""
        kit = BomComponent(
            ComponentType.OUTPUT_SHAFT_KIT, Missing(), "Required for chain drive configuration"
        )
        text = format_bom_copy_text(BomOutput(resolution=_resolution(*_shaft_mount_components(kit=kit))))

        assert "4) Output Shaft Kit: — (select in Drive Arrangement)" in text
        assert "- MISSING: Output Shaft Kit PN (Select an output shaft option to resolve this.)" in text

    def test_missing_motor(self) -> None:
        """A missing motor gets a bare placeholder and a note."""
        motor = BomComponent(ComponentType.MOTOR, Missing(), "63L/4 Motor 0.5HP")
        text = format_bom_copy_text(
            BomOutput(resolution=_resolution(*_shaft_mount_components(motor=motor)))
        )

        assert "2) Motor (STD or BRK): —  | 63L/4 Motor 0.5HP" in text
        assert "- MISSING: Motor (STD or BRK) PN (No matching component found in component map.)" in text

    def test_missing_gear_unit_note(self) -> None:
        gear = BomComponent(ComponentType.GEAR_UNIT, Missing())
        text = format_bom_copy_text(BomOutput(resolution=_resolution(*_shaft_mount_components(gear=gear))))

        assert "1) Gear Unit: —  | —" in text
        assert "Gear unit PN mapping not keyed for this model yet." in text

    def test_resolved_lines_never_show_placeholder(self) -> None:
        """A placeholder appears only beside unresolved components."""
        kit = BomComponent(ComponentType.OUTPUT_SHAFT_KIT, Resolved("60690010"), "SI63 Kit")
        text = format_bom_copy_text(BomOutput(resolution=_resolution(*_shaft_mount_components(kit=kit))))

        numbered = [line for line in text.splitlines() if line[:2] in {"1)", "2)", "3)", "4)"}]
        assert len(numbered) == 4
        assert all("—" not in line for line in numbered)

    def test_unparseable_model_lists_all_four(self) -> None:
        """Components absent from the resolution are listed as missing."""
        resolution = BomResolution(
            model_type="bogus",
            parsed=None,
            components=[
                BomComponent(ComponentType.GEAR_UNIT, Missing(), "Unable to parse model"),
                BomComponent(ComponentType.MOTOR, Missing()),
                BomComponent(ComponentType.ADAPTER, Missing()),
            ],
        )
        text = format_bom_copy_text(BomOutput(resolution=resolution))

        assert "Selected Model: bogus" in text
        assert "1) Gear Unit: —  | Unable to parse model" in text
        assert "4) Output Shaft Kit: — (select in Drive Arrangement)  | —" in text
        assert text.count("- MISSING:") == 4


class TestOptionalLines:
    """Bushing line and multiple match note."""

    def test_bushing_listed_fifth(self) -> None:
        """The bushing line follows the kit when a bore was requested."""
        bushing = BomComponent(
            ComponentType.HOLLOW_SHAFT_BUSHING, Resolved("60695110"), "SI63 Bushing 1.25 in"
        )
        components = _shaft_mount_components() + [bushing]
        text = format_bom_copy_text(BomOutput(resolution=_resolution(*components)))

        assert "5) Hollow Shaft Bushing: 60695110  | SI63 Bushing 1.25 in" in text

    def test_no_bushing_line_without_request(self, complete_output: BomOutput) -> None:
        assert "5)" not in format_bom_copy_text(complete_output)

    def test_multiple_matches_note(self) -> None:
        """Any component picked from several rows adds a note."""
        kit = BomComponent(
            ComponentType.OUTPUT_SHAFT_KIT,
            Resolved("60690010"),
            "SI63 Kit",
            had_multiple_matches=True,
        )
        text = format_bom_copy_text(BomOutput(resolution=_resolution(*_shaft_mount_components(kit=kit))))

        assert "- NOTE: Multiple matches existed; selected first deterministic match." in text
