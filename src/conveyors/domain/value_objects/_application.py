"""Application vocabulary: what is conveyed, where, and how it is delivered."""

from __future__ import annotations

from enum import Enum


class MaterialType(str, Enum):
    """Material of the parts being conveyed."""

    STEEL = "Steel"
    ALUMINUM = "Aluminum"
    PLASTIC = "Plastic"
    WOOD = "Wood"
    OTHER = "Other"


class ProcessType(str, Enum):
    """Process the conveyor serves."""

    ASSEMBLY = "Assembly"
    PACKAGING = "Packaging"
    INSPECTION = "Inspection"
    MACHINING = "Machining"
    OTHER = "Other"


class PartsSharp(str, Enum):
    NO = "No"
    YES = "Yes"


class EnvironmentFactors(str, Enum):
    """Installation environment.

    Washdown and dusty environments reduce belt grip on crowned pulleys
    and raise the tracking risk.
    """

    INDOOR = "Indoor"
    OUTDOOR = "Outdoor"
    WASHDOWN = "Washdown"
    DUSTY = "Dusty"
    OTHER = "Other"


class FluidType(str, Enum):
    """Fluid contamination carried by the parts."""

    NONE = "None"
    MINIMAL_RESIDUAL_OIL = "Minimal Residual Oil"
    CONSIDERABLE_OIL_LIQUID = "Considerable Oil / Liquid"


class PartTemperatureClass(str, Enum):
    """Thermal class of the conveyed parts.

    Attributes:
        AMBIENT: Room temperature parts.
        HOT: Warm parts that call for a high-temperature belt.
        RED_HOT: Glowing parts that no belt in this model can carry.
    """

    AMBIENT = "Ambient"
    HOT = "Hot"
    RED_HOT = "Red Hot"


class AmbientTemperature(str, Enum):
    NORMAL = "Normal (60-90°F)"
    COLD = "Cold (<60°F)"
    HOT = "Hot (>90°F)"


class PowerFeed(str, Enum):
    V120_1PH = "120V 1-Phase"
    V240_1PH = "240V 1-Phase"
    V480_3PH = "480V 3-Phase"
    V600_3PH = "600V 3-Phase"


class ControlsPackage(str, Enum):
    NONE = "None"
    START_STOP = "Start/Stop"
    VFD = "VFD"
    FULL_AUTOMATION = "Full Automation"


class SpecSource(str, Enum):
    STANDARD = "Standard"
    CUSTOMER_SPECIFICATION = "Customer Specification"


class SupportOption(str, Enum):
    FLOOR_MOUNTED = "Floor Mounted"
    SUSPENDED = "Suspended"
    INTEGRATED_FRAME = "Integrated Frame"


class FieldWiringRequired(str, Enum):
    NO = "No"
    YES = "Yes"


class BearingGrade(str, Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    SEALED_FOR_LIFE = "Sealed for Life"


class DocumentationPackage(str, Enum):
    BASIC = "Basic"
    FULL = "Full"
    AS_BUILT = "As-Built Drawings"


class FinishPaintSystem(str, Enum):
    NONE = "None"
    POWDER_COAT = "Powder Coat"
    INDUSTRIAL_ENAMEL = "Industrial Enamel"
    GALVANIZED = "Galvanized"


class LabelsRequired(str, Enum):
    NO = "No"
    YES = "Yes"


class SendToEstimating(str, Enum):
    NO = "No"
    YES = "Yes"


class MotorBrand(str, Enum):
    STANDARD = "Standard"
    BALDOR = "Baldor"
    SEW = "SEW"
    NORD_GEAR = "Nord Gear"
