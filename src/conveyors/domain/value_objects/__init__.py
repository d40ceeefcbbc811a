"""Value objects for the conveyor domain.

Closed vocabularies for every categorical input. All enums use
(str, Enum) so their values round-trip through JSON unchanged.
"""

from __future__ import annotations

from ._application import (
    AmbientTemperature,
    BearingGrade,
    ControlsPackage,
    DocumentationPackage,
    EnvironmentFactors,
    FieldWiringRequired,
    FinishPaintSystem,
    FluidType,
    LabelsRequired,
    MaterialType,
    MotorBrand,
    PartsSharp,
    PartTemperatureClass,
    PowerFeed,
    ProcessType,
    SendToEstimating,
    SpecSource,
    SupportOption,
)
from ._drivetrain import ComponentType, MountingVariant, OutputShaftOption
from ._findings import Severity, TrackingRiskLevel
from ._mechanical import (
    BedType,
    BeltTrackingMethod,
    DirectionMode,
    EndGuards,
    FrameHeightMode,
    GearmotorMountingStyle,
    LacingStyle,
    Orientation,
    PremiumLevel,
    ShaftDiameterMode,
    SideLoadingDirection,
    SideLoadingSeverity,
    SpeedMode,
)

__all__ = [
    # Application
    "AmbientTemperature",
    "BearingGrade",
    "ControlsPackage",
    "DocumentationPackage",
    "EnvironmentFactors",
    "FieldWiringRequired",
    "FinishPaintSystem",
    "FluidType",
    "LabelsRequired",
    "MaterialType",
    "MotorBrand",
    "PartsSharp",
    "PartTemperatureClass",
    "PowerFeed",
    "ProcessType",
    "SendToEstimating",
    "SpecSource",
    "SupportOption",
    # Mechanical
    "BedType",
    "BeltTrackingMethod",
    "DirectionMode",
    "EndGuards",
    "FrameHeightMode",
    "GearmotorMountingStyle",
    "LacingStyle",
    "Orientation",
    "PremiumLevel",
    "ShaftDiameterMode",
    "SideLoadingDirection",
    "SideLoadingSeverity",
    "SpeedMode",
    # Findings
    "Severity",
    "TrackingRiskLevel",
    # Drivetrain
    "ComponentType",
    "MountingVariant",
    "OutputShaftOption",
]
