"""Mechanical vocabulary: geometry options, belt tracking, drive and frame."""

from __future__ import annotations

from enum import Enum


class Orientation(str, Enum):
    """Part orientation on the belt.

    Lengthwise parts travel along their length; crosswise parts travel
    along their width.
    """

    LENGTHWISE = "Lengthwise"
    CROSSWISE = "Crosswise"


class EndGuards(str, Enum):
    NONE = "None"
    HEAD_END = "Head End"
    TAIL_END = "Tail End"
    BOTH_ENDS = "Both Ends"


class LacingStyle(str, Enum):
    ENDLESS = "Endless"
    CLIPPER_LACING = "Clipper Lacing"
    STANDARD = "Standard"


class DirectionMode(str, Enum):
    ONE_DIRECTION = "One Direction"
    REVERSING = "Reversing"


class SideLoadingDirection(str, Enum):
    NONE = "None"
    LEFT = "Left"
    RIGHT = "Right"
    BOTH = "Both"


class SideLoadingSeverity(str, Enum):
    LIGHT = "Light"
    MODERATE = "Moderate"
    HEAVY = "Heavy"


class BeltTrackingMethod(str, Enum):
    """Belt-centering strategy.

    Attributes:
        CROWNED: Passive centering from the pulley shape.
        V_GUIDED: Active centering from a guide profile on the belt underside.
    """

    CROWNED = "Crowned"
    V_GUIDED = "V-guided"


class ShaftDiameterMode(str, Enum):
    CALCULATED = "Calculated"
    MANUAL = "Manual"


class SpeedMode(str, Enum):
    """Which speed input is primary.

    Attributes:
        BELT_SPEED: Belt speed is given and the drive RPM is derived.
        DRIVE_RPM: Drive RPM is given and the belt speed is derived.
    """

    BELT_SPEED = "belt_speed"
    DRIVE_RPM = "drive_rpm"


class GearmotorMountingStyle(str, Enum):
    """How the gearmotor couples to the drive shaft.

    Attributes:
        SHAFT_MOUNTED: Hollow-bore gearmotor directly on the drive shaft.
        BOTTOM_MOUNT: Gearmotor below the bed, coupled by chain and sprockets.
    """

    SHAFT_MOUNTED = "shaft_mounted"
    BOTTOM_MOUNT = "bottom_mount"


class FrameHeightMode(str, Enum):
    STANDARD = "Standard"
    LOW_PROFILE = "Low Profile"
    CUSTOM = "Custom"


class BedType(str, Enum):
    """Support under the carrying side of the belt.

    Attributes:
        SLIDER_BED: Belt slides over a flat plate (higher friction).
        ROLLER_BED: Belt rides on rollers (lower friction).
        OTHER: Unlisted bed; behaves like the parameter default.
    """

    SLIDER_BED = "slider_bed"
    ROLLER_BED = "roller_bed"
    OTHER = "other"


class PremiumLevel(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"
    PREMIUM_PLUS = "premium_plus"
