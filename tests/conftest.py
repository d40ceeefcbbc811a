"""Pytest configuration and shared fixtures for conveyor tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from conveyors.application.config.products import (
    BELT_CONVEYOR,
    SLIDERBED_CONVEYOR,
    ProductProfile,
)
from conveyors.contracts.catalog import VendorComponent
from conveyors.domain.entities import CalculationParameters, ConveyorInputs
from conveyors.domain.value_objects import ComponentType
from conveyors.infrastructure.catalog import InMemoryVendorCatalog

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def baseline_inputs() -> ConveyorInputs:
    """Clean configuration: 120" x 48" slider bed, flat, crowned, 65 FPM."""
    return ConveyorInputs(conveyor_length_cc_in=120.0, belt_width_in=48.0)


@pytest.fixture
def parameters() -> CalculationParameters:
    return CalculationParameters()


@pytest.fixture
def belt_product() -> ProductProfile:
    return BELT_CONVEYOR


@pytest.fixture
def sliderbed_product() -> ProductProfile:
    return SLIDERBED_CONVEYOR


@pytest.fixture
def configs_path() -> Path:
    return FIXTURES_PATH / "configs"


@pytest.fixture
def catalogs_path() -> Path:
    return FIXTURES_PATH / "catalogs"


# =============================================================================
# Vendor catalog fixtures
# =============================================================================


GEAR_UNIT_PN = "60691130"
MOTOR_PN = "33120010"
ADAPTER_PN = "60395510"
STYLE_KIT_PN = "60690010"
METRIC_KIT_PN = "60690120"
DIAMETER_KIT_PN = "60690200"
BUSHING_PN = "60695110"


@pytest.fixture
def catalog_rows() -> list[VendorComponent]:
    """NORD rows for an SI63 gearmotor with a 56C adapter and 63L/4 motor."""
    return [
        VendorComponent(
            GEAR_UNIT_PN,
            "NORD FLEXBLOC SI63 Gear Unit i=80 1.4375 in Hollow Shaft",
            ComponentType.GEAR_UNIT,
            metadata={"gear_unit_size": "SI63", "ratio": 80.0, "mounting_variant": "inch_hollow"},
        ),
        VendorComponent(
            "SI63-80-INCH",
            "Internal placeholder",
            ComponentType.GEAR_UNIT,
            metadata={"gear_unit_size": "SI63", "ratio": 80.0, "mounting_variant": "inch_hollow"},
        ),
        VendorComponent(
            "60691140",
            "NORD FLEXBLOC SI63 Gear Unit i=80 Hollow Shaft 30 mm",
            ComponentType.GEAR_UNIT,
            metadata={"gear_unit_size": "SI63", "ratio": 80.0, "mounting_variant": "metric_hollow"},
        ),
        VendorComponent(
            MOTOR_PN,
            "63L/4 Motor 0.25HP",
            ComponentType.MOTOR,
            metadata={"adapter_code": "56C", "motor_frame": "63L/4", "motor_hp": 0.25},
        ),
        VendorComponent(
            "33120020",
            "63L/4 Motor 0.33HP",
            ComponentType.MOTOR,
            metadata={"adapter_code": "56C", "motor_frame": "63L/4", "motor_hp": 0.33},
        ),
        VendorComponent(
            ADAPTER_PN,
            "NEMA 56C Adapter",
            ComponentType.ADAPTER,
            metadata={"adapter_code": "56C"},
        ),
        VendorComponent(
            STYLE_KIT_PN,
            "SI63 Output Shaft Kit, inch keyed, single",
            ComponentType.OUTPUT_SHAFT_KIT,
            metadata={
                "gear_unit_size": "SI63",
                "output_shaft_option": "inch_keyed",
                "shaft_style": "single",
            },
        ),
        VendorComponent(
            DIAMETER_KIT_PN,
            "SI63 Output Shaft Kit, inch keyed, 1.25 in",
            ComponentType.OUTPUT_SHAFT_KIT,
            metadata={
                "gear_unit_size": "SI63",
                "output_shaft_option": "inch_keyed",
                "shaft_diameter_in": 1.25,
            },
        ),
        VendorComponent(
            METRIC_KIT_PN,
            "SI63 Output Shaft Kit, metric keyed",
            ComponentType.OUTPUT_SHAFT_KIT,
            metadata={"gear_unit_size": "SI63", "output_shaft_option": "metric_keyed"},
        ),
        VendorComponent(
            BUSHING_PN,
            "SI63 Hollow Shaft Bushing 1.25 in",
            ComponentType.HOLLOW_SHAFT_BUSHING,
            metadata={"gear_unit_size": "SI63", "bore_in": 1.25},
        ),
    ]


@pytest.fixture
def catalog(catalog_rows: list[VendorComponent]) -> InMemoryVendorCatalog:
    return InMemoryVendorCatalog(catalog_rows)
