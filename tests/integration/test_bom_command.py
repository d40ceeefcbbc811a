"""Integration tests for ResolveBomCommand.

Configuration files and the JSON catalog are loaded from fixtures and
resolved end-to-end, the way the bom CLI command does it.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conveyors.application import ResolveBomCommand
from conveyors.application.config import BomRequestConfig, load_config
from conveyors.domain.services.bom import Configured, NotRequired, Resolved
from conveyors.domain.value_objects import ComponentType
from conveyors.infrastructure.catalog import InMemoryVendorCatalog, load_catalog
from conveyors.infrastructure.exporters import format_bom_copy_text


@pytest.fixture
def file_catalog(catalogs_path: Path) -> InMemoryVendorCatalog:
    """Catalog loaded from the JSON fixture."""
    return load_catalog(catalogs_path / "nord_catalog.json")


@pytest.mark.asyncio
class TestResolveBomCommand:
    """End-to-end BOM resolution from configuration files."""

    async def test_shaft_mount_complete(
        self, configs_path: Path, file_catalog: InMemoryVendorCatalog
    ) -> None:
        """Every component resolves or is not required."""
        config = load_config(configs_path / "bom_shaft_mount.json")
        output = await ResolveBomCommand(file_catalog).execute(config.bom)

        assert output.is_complete
        assert output.exit_code == 0
        assert output.applied_sf == 1.5
        assert output.catalog_sf == 1.8
        assert output.catalog_page == "G1000 p. 212"
        resolution = output.resolution
        assert resolution.component(ComponentType.GEAR_UNIT).outcome == Resolved("60691130")
        assert resolution.component(ComponentType.OUTPUT_SHAFT_KIT).outcome == NotRequired()

    async def test_bottom_mount_pending_kit(
        self,
        configs_path: Path,
        file_catalog: InMemoryVendorCatalog,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """An unmapped kit option leaves the BOM incomplete."""
        config = load_config(configs_path / "bom_bottom_mount.json")
        with caplog.at_level("INFO"):
            output = await ResolveBomCommand(file_catalog).execute(config.bom)

        assert not output.is_complete
        assert output.exit_code == 2
        kit = output.resolution.component(ComponentType.OUTPUT_SHAFT_KIT)
        assert kit.outcome == Configured("Metric hollow")
        assert "incomplete: output_shaft_kit" in caplog.text

    async def test_copy_text_from_command(
        self, configs_path: Path, file_catalog: InMemoryVendorCatalog
    ) -> None:
        config = load_config(configs_path / "bom_shaft_mount.json")
        text = format_bom_copy_text(await ResolveBomCommand(file_catalog).execute(config.bom))

        assert text.splitlines()[:3] == [
            "NORD FLEXBLOC Gearmotor BOM",
            "Selected Model: SK 1SI63 - 56C - 63L/4",
            "Catalog Page: G1000 p. 212",
        ]

    async def test_bushing_and_keyed_kit(self, catalog: InMemoryVendorCatalog) -> None:
        """A keyed bottom mount with a bushing resolves five components."""
        request = BomRequestConfig(
            model_type="SK 1SI63 - 56C - 63L/4",
            motor_hp=0.25,
            worm_ratio=80,
            mounting_style="bottom_mount",
            output_shaft_option="inch_keyed",
            shaft_style="single",
            bushing_bore_in=1.25,
        )
        output = await ResolveBomCommand(catalog).execute(request)

        assert [c.part_number for c in output.resolution.components] == [
            "60691130",
            "33120010",
            "60395510",
            "60690010",
            "60695110",
        ]
        assert output.is_complete

    async def test_unparseable_model(self, catalog: InMemoryVendorCatalog) -> None:
        """An unparseable code never raises."""
        output = await ResolveBomCommand(catalog).execute(
            BomRequestConfig(model_type="SK ???", motor_hp=0.25)
        )

        assert output.resolution.parsed is None
        assert output.exit_code == 2

    async def test_unparseable_shaft_mount_copy_text(self, catalog: InMemoryVendorCatalog) -> None:
        """The kit line still reads Not Required for a shaft-mounted drive."""
        output = await ResolveBomCommand(catalog).execute(
            BomRequestConfig(model_type="garbage", motor_hp=0.5)
        )
        text = format_bom_copy_text(output)

        assert "4) Output Shaft Kit: — (not required)  | Not required for shaft mount" in text
        assert "MISSING: Output Shaft Kit" not in text
        assert text.count("- MISSING:") == 3
