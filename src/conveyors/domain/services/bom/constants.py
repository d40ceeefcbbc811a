"""Constants for gearmotor BOM resolution."""

from __future__ import annotations

from conveyors.domain.value_objects import ComponentType, MountingVariant, OutputShaftOption

VENDOR_NORD = "NORD"

# Real NORD part numbers: 8 digits starting with 3 or 6
PART_NUMBER_PATTERN = r"^[36]\d{7}$"

# Gear unit and catalog ratios are compared at this precision
RATIO_DECIMALS = 1

# Motor hp match tolerance
MOTOR_HP_TOLERANCE = 0.01

# US market default
DEFAULT_MOUNTING_VARIANT = MountingVariant.INCH_HOLLOW

OUTPUT_SHAFT_OPTION_LABELS: dict[OutputShaftOption, str] = {
    OutputShaftOption.INCH_KEYED: "Inch keyed bore",
    OutputShaftOption.METRIC_KEYED: "Metric keyed bore",
    OutputShaftOption.INCH_HOLLOW: "Inch hollow",
    OutputShaftOption.METRIC_HOLLOW: "Metric hollow",
}

# Copy-text labels, in the order components are listed
COMPONENT_LABELS: dict[ComponentType, str] = {
    ComponentType.GEAR_UNIT: "Gear Unit",
    ComponentType.MOTOR: "Motor (STD or BRK)",
    ComponentType.ADAPTER: "Adapter",
    ComponentType.OUTPUT_SHAFT_KIT: "Output Shaft Kit",
    ComponentType.HOLLOW_SHAFT_BUSHING: "Hollow Shaft Bushing",
}

NOT_REQUIRED_FOR_SHAFT_MOUNT = "Not required for shaft mount"
REQUIRED_FOR_CHAIN_DRIVE = "Required for chain drive configuration"
UNPARSEABLE_MODEL = "Unable to parse model"
