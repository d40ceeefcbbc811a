"""Conveyor input schema.

Mirrors the domain ConveyorInputs record field for field. The schema
enforces types and enum membership only. Numeric ranges are left to the
validation engine, which reports them as field-scoped errors instead of
rejecting the file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from conveyors.domain.value_objects import (
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


class ConveyorInputsConfig(BaseModel):
    """Conveyor application inputs as they appear in a configuration file.

    Legacy aliases (for example ``conveyor_width_in``) are rewritten by the
    normalization step before this model validates, so only canonical
    field names are accepted here.
    """

    model_config = ConfigDict(extra="forbid")

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
    gearmotor_mounting_style: GearmotorMountingStyle = GearmotorMountingStyle.SHAFT_MOUNTED
    gm_sprocket_teeth: int | None = None
    drive_shaft_sprocket_teeth: int | None = None

    # Bed
    bed_type: BedType = BedType.SLIDER_BED
