"""Drivetrain vocabulary used by the gearmotor bill-of-materials resolver."""

from __future__ import annotations

from enum import Enum


class ComponentType(str, Enum):
    """Orderable gearmotor components, in copy-text order."""

    GEAR_UNIT = "gear_unit"
    MOTOR = "motor"
    ADAPTER = "adapter"
    OUTPUT_SHAFT_KIT = "output_shaft_kit"
    HOLLOW_SHAFT_BUSHING = "hollow_shaft_bushing"


class MountingVariant(str, Enum):
    """Gear unit output bore family encoded in the gear unit part number."""

    INCH_HOLLOW = "inch_hollow"
    METRIC_HOLLOW = "metric_hollow"


class OutputShaftOption(str, Enum):
    """Output shaft kit options offered for chain-coupled drives."""

    INCH_KEYED = "inch_keyed"
    METRIC_KEYED = "metric_keyed"
    INCH_HOLLOW = "inch_hollow"
    METRIC_HOLLOW = "metric_hollow"
