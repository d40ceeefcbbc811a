"""Domain entities for conveyor configuration.

ConveyorInputs is the canonical flat record of one conveyor application.
Legacy aliases are resolved before one of these is built, so every rule
and formula reads canonical field names only. CalculationParameters holds
the tunable physical constants a product family calculates with.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from .value_objects import (
    AmbientTemperature,
    BearingGrade,
    BedType,
    BeltTrackingMethod,
    ControlsPackage,
    DirectionMode,
    DocumentationPackage,
    EndGuards,
    EnvironmentFactors,
    FieldWiringRequired,
    FinishPaintSystem,
    FluidType,
    FrameHeightMode,
    GearmotorMountingStyle,
    LabelsRequired,
    LacingStyle,
    MaterialType,
    MotorBrand,
    Orientation,
    PartsSharp,
    PartTemperatureClass,
    PowerFeed,
    ProcessType,
    SendToEstimating,
    ShaftDiameterMode,
    SideLoadingDirection,
    SideLoadingSeverity,
    SpecSource,
    SpeedMode,
    SupportOption,
)


@dataclass(frozen=True)
class ConveyorInputs:
    """Configuration input for one belt conveyor application.

    Lengths are in inches, weights in pounds, speeds in feet per minute
    and angles in degrees. Optional numeric fields left as None mean
    "not provided"; formulas fall back to parameters or presets for them
    and validators skip their range checks.

    Attributes:
        conveyor_length_cc_in: Center-to-center length between pulleys.
        belt_width_in: Belt width.
        conveyor_incline_deg: Incline angle from horizontal.
        pulley_diameter_in: Legacy single pulley diameter.
        drive_pulley_diameter_in: Drive (head) pulley diameter.
        tail_pulley_diameter_in: Tail pulley diameter.
        speed_mode: Which of belt speed or drive RPM is the primary input.
        belt_speed_fpm: Belt speed, used in belt_speed mode.
        drive_rpm: Legacy drive shaft RPM.
        drive_rpm_input: Drive shaft RPM, used in drive_rpm mode.
        part_weight_lbs: Weight of one part.
        part_length_in: Part length.
        part_width_in: Part width.
        part_spacing_in: Gap between consecutive parts.
        orientation: Which part dimension lies along the direction of travel.
        required_throughput_pph: Required parts per hour. Throughput outputs
            are only produced when this is greater than zero.
        throughput_margin_pct: Extra capacity on top of the requirement.
        safety_factor: Power-user override of the torque safety factor.
        belt_coeff_piw: Power-user belt weight coefficient per inch of width.
        belt_coeff_pil: Power-user belt weight coefficient per inch of length.
        starting_belt_pull_lb: Power-user starting pull allowance.
        friction_coeff: Power-user friction coefficient, wins over bed presets.
        motor_rpm: Power-user motor RPM.
        belt_catalog_key: Selected catalog belt. Enables the belt minimum
            pulley diameter rule.
        belt_piw: PIW of the selected catalog belt.
        belt_pil: PIL of the selected catalog belt.
        belt_piw_override: User override of the catalog belt PIW.
        belt_pil_override: User override of the catalog belt PIL.
        belt_min_pulley_dia_no_vguide_in: Catalog minimum pulley diameter
            for crowned tracking.
        belt_min_pulley_dia_with_vguide_in: Catalog minimum pulley diameter
            for V-guided tracking.
        cycle_time_seconds: Start/stop cycle time.
    """

    conveyor_length_cc_in: float
    belt_width_in: float

    # Geometry
    conveyor_incline_deg: float = 0.0
    pulley_diameter_in: float | None = None
    drive_pulley_diameter_in: float | None = None
    tail_pulley_diameter_in: float | None = None
    drop_height_in: float = 0.0

    # Speed and throughput
    speed_mode: SpeedMode = SpeedMode.BELT_SPEED
    belt_speed_fpm: float = 65.0
    drive_rpm: float | None = None
    drive_rpm_input: float | None = None
    required_throughput_pph: float | None = None
    throughput_margin_pct: float = 0.0

    # Product / part
    part_weight_lbs: float | None = None
    part_length_in: float | None = None
    part_width_in: float | None = None
    part_spacing_in: float = 0.0
    orientation: Orientation = Orientation.LENGTHWISE
    part_temperature_class: PartTemperatureClass = PartTemperatureClass.AMBIENT
    fluid_type: FluidType = FluidType.NONE

    # Power-user overrides
    safety_factor: float | None = None
    belt_coeff_piw: float | None = None
    belt_coeff_pil: float | None = None
    starting_belt_pull_lb: float | None = None
    friction_coeff: float | None = None
    motor_rpm: float | None = None

    # Application
    material_type: MaterialType = MaterialType.STEEL
    process_type: ProcessType = ProcessType.ASSEMBLY
    parts_sharp: PartsSharp = PartsSharp.NO
    environment_factors: EnvironmentFactors = EnvironmentFactors.INDOOR
    ambient_temperature: AmbientTemperature = AmbientTemperature.NORMAL
    power_feed: PowerFeed = PowerFeed.V480_3PH
    controls_package: ControlsPackage = ControlsPackage.START_STOP
    spec_source: SpecSource = SpecSource.STANDARD
    customer_spec_reference: str | None = None
    support_option: SupportOption = SupportOption.FLOOR_MOUNTED
    field_wiring_required: FieldWiringRequired = FieldWiringRequired.NO
    bearing_grade: BearingGrade = BearingGrade.STANDARD
    documentation_package: DocumentationPackage = DocumentationPackage.BASIC
    finish_paint_system: FinishPaintSystem = FinishPaintSystem.POWDER_COAT
    labels_required: LabelsRequired = LabelsRequired.YES
    send_to_estimating: SendToEstimating = SendToEstimating.NO
    motor_brand: MotorBrand = MotorBrand.STANDARD

    # Features and options
    finger_safe: bool = False
    end_guards: EndGuards = EndGuards.NONE
    bottom_covers: bool = False
    lacing_style: LacingStyle = LacingStyle.ENDLESS

    # Application demands
    direction_mode: DirectionMode = DirectionMode.ONE_DIRECTION
    side_loading_direction: SideLoadingDirection = SideLoadingDirection.NONE
    side_loading_severity: SideLoadingSeverity = SideLoadingSeverity.LIGHT
    start_stop_application: bool = False
    cycle_time_seconds: float | None = None

    # Belt tracking and selection
    belt_tracking_method: BeltTrackingMethod = BeltTrackingMethod.CROWNED
    v_guide_key: str | None = None
    belt_catalog_key: str | None = None
    belt_piw: float | None = None
    belt_pil: float | None = None
    belt_piw_override: float | None = None
    belt_pil_override: float | None = None
    belt_min_pulley_dia_no_vguide_in: float | None = None
    belt_min_pulley_dia_with_vguide_in: float | None = None

    # Shafts
    shaft_diameter_mode: ShaftDiameterMode = ShaftDiameterMode.CALCULATED
    drive_shaft_diameter_in: float | None = None
    tail_shaft_diameter_in: float | None = None

    # Frame
    frame_height_mode: FrameHeightMode = FrameHeightMode.STANDARD
    custom_frame_height_in: float | None = None

    # Drive arrangement
    gearmotor_mounting_style: GearmotorMountingStyle = (
        GearmotorMountingStyle.SHAFT_MOUNTED
    )
    gm_sprocket_teeth: int | None = None
    drive_shaft_sprocket_teeth: int | None = None

    # Bed
    bed_type: BedType = BedType.SLIDER_BED

    @property
    def is_v_guided(self) -> bool:
        return self.belt_tracking_method == BeltTrackingMethod.V_GUIDED

    def with_changes(self, **changes: object) -> ConveyorInputs:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))


@dataclass(frozen=True)
class CalculationParameters:
    """Tunable physical constants for a product family.

    Attributes:
        friction_coeff: Fallback belt friction coefficient.
        safety_factor: Torque safety factor.
        starting_belt_pull_lb: Fixed starting pull allowance in pounds.
        motor_rpm: Nominal motor RPM.
        gravity_in_per_s2: Gravity constant in inches per second squared.
        piw_2p5: Belt PIW when the drive pulley is 2.5".
        piw_other: Belt PIW for every other drive pulley.
        pil_2p5: Belt PIL when the drive pulley is 2.5".
        pil_other: Belt PIL for every other drive pulley.
        friction_coeff_slider_bed: Friction preset for a slider bed.
        friction_coeff_roller_bed: Friction preset for a roller bed.
        pulley_face_extra_v_guided_in: Pulley face allowance over belt width
            for V-guided tracking.
        pulley_face_extra_crowned_in: Pulley face allowance over belt width
            for crowned tracking.
    """

    friction_coeff: float = 0.25
    safety_factor: float = 2.0
    starting_belt_pull_lb: float = 75.0
    motor_rpm: float = 1750.0
    gravity_in_per_s2: float = 386.1
    piw_2p5: float = 0.138
    piw_other: float = 0.109
    pil_2p5: float = 0.138
    pil_other: float = 0.109
    friction_coeff_slider_bed: float = 0.25
    friction_coeff_roller_bed: float = 0.03
    pulley_face_extra_v_guided_in: float = 0.5
    pulley_face_extra_crowned_in: float = 2.0

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))
