"""Unit tests for ValidatorRegistry and the advisory validators."""

from __future__ import annotations

import logging

import pytest

from conveyors.application.config.products import ProductProfile
from conveyors.application.config.validators import (
    ParameterValidator,
    StructuralValidator,
    TrackingValidator,
    ValidationMessage,
    ValidationResult,
    ValidatorRegistry,
    default_registry,
)
from conveyors.contracts.validators import Validator
from conveyors.domain.entities import CalculationParameters, ConveyorInputs
from conveyors.domain.value_objects import (
    BeltTrackingMethod,
    DirectionMode,
    EnvironmentFactors,
    PartTemperatureClass,
    Severity,
)


class _ExplodingValidator:
    @property
    def name(self) -> str:
        return "exploding"

    def validate(self, inputs, parameters, product) -> ValidationResult:
        raise RuntimeError("boom")


class _WarningValidator:
    def __init__(self, name: str = "always_warns") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def validate(self, inputs, parameters, product) -> ValidationResult:
        return ValidationResult().add_warning("belt_width_in", f"from {self._name}")


class TestValidationResult:
    """Exit codes and severity bucketing."""

    def test_empty_is_valid(self) -> None:
        """No findings is exit code 0."""
        result = ValidationResult()

        assert result.is_valid
        assert result.exit_code == 0

    def test_error_is_exit_1(self) -> None:
        """Errors win over warnings."""
        result = ValidationResult().add_warning("a", "w").add_error("b", "e")

        assert result.exit_code == 1

    def test_warning_is_exit_2(self) -> None:
        """Warnings without errors are exit code 2."""
        assert ValidationResult().add_warning("a", "w").exit_code == 2

    def test_info_alone_is_exit_0(self) -> None:
        """Info notes are advisory and do not change the exit code."""
        result = ValidationResult().add_info("premium", "note")

        assert result.warnings == [ValidationMessage("premium", "note", Severity.INFO)]
        assert result.exit_code == 0

    def test_merge_keeps_order(self) -> None:
        """Merging appends findings in order."""
        first = ValidationResult().add_error("a", "1")
        second = ValidationResult().add_error("b", "2")

        assert [e.field for e in first.merge(second).errors] == ["a", "b"]

    def test_to_dict(self) -> None:
        """Messages serialize severity by value."""
        message = ValidationMessage("field", "text", Severity.WARNING)

        assert message.to_dict() == {"field": "field", "message": "text", "severity": "warning"}


class TestValidatorRegistry:
    """Registration, enable/disable and running."""

    def test_default_registry_order(self) -> None:
        """Validators run structural first, tracking last."""
        assert default_registry().available() == [
            "structural",
            "parameters",
            "domain_rules",
            "tracking",
        ]

    def test_default_validators_satisfy_protocol(self) -> None:
        """Every default validator implements the Validator protocol."""
        registry = default_registry()

        for name in registry.available():
            assert isinstance(registry.get(name), Validator)

    def test_registries_are_independent(self) -> None:
        """Disabling on one registry does not affect another."""
        first = default_registry()
        first.disable("tracking")

        assert default_registry().is_enabled("tracking")

    def test_get_unknown_raises(self) -> None:
        """Unknown names list what is available."""
        registry = ValidatorRegistry()
        registry.register(StructuralValidator())

        with pytest.raises(KeyError, match="Available validators: structural"):
            registry.get("missing")

    def test_enable_unknown_raises(self) -> None:
        """Enable and disable require a registered name."""
        registry = ValidatorRegistry()

        with pytest.raises(KeyError):
            registry.enable("missing")
        with pytest.raises(KeyError):
            registry.disable("missing")

    def test_register_replaces_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Re-registering a name replaces it in place."""
        registry = ValidatorRegistry()
        registry.register(_WarningValidator("dup"))
        registry.register(StructuralValidator())

        with caplog.at_level(logging.WARNING):
            registry.register(_WarningValidator("dup"))

        assert registry.available() == ["dup", "structural"]
        assert "Replacing validator 'dup'" in caplog.text

    def test_disabled_validator_skipped(
        self,
        baseline_inputs: ConveyorInputs,
        parameters: CalculationParameters,
        belt_product: ProductProfile,
    ) -> None:
        """Disabled validators produce no findings."""
        registry = ValidatorRegistry()
        registry.register(_WarningValidator())
        registry.disable("always_warns")

        assert registry.validate_all(baseline_inputs, parameters, belt_product).warnings == []

        registry.enable("always_warns")
        assert len(registry.validate_all(baseline_inputs, parameters, belt_product).warnings) == 1

    def test_exception_becomes_error(
        self,
        baseline_inputs: ConveyorInputs,
        parameters: CalculationParameters,
        belt_product: ProductProfile,
    ) -> None:
        """A failing validator is reported and the others still run."""
        registry = ValidatorRegistry()
        registry.register(_ExplodingValidator())
        registry.register(_WarningValidator())

        result = registry.validate_all(baseline_inputs, parameters, belt_product)

        assert [(e.field, e.message) for e in result.errors] == [
            ("validation", "Validator 'exploding' failed: boom")
        ]
        assert len(result.warnings) == 1

    def test_findings_in_registration_order(
        self,
        parameters: CalculationParameters,
        belt_product: ProductProfile,
    ) -> None:
        """Structural errors come before rule errors."""
        inputs = ConveyorInputs(
            conveyor_length_cc_in=0.0,
            belt_width_in=24.0,
            part_temperature_class=PartTemperatureClass.RED_HOT,
        )
        result = default_registry().validate_all(inputs, parameters, belt_product)

        assert [e.field for e in result.errors] == [
            "conveyor_length_cc_in",
            "part_temperature_class",
        ]

    def test_validate_single(
        self,
        baseline_inputs: ConveyorInputs,
        parameters: CalculationParameters,
        belt_product: ProductProfile,
    ) -> None:
        """A single validator can be run by name."""
        result = default_registry().validate_single(
            "structural", baseline_inputs.with_changes(belt_width_in=0.0), parameters, belt_product
        )

        assert result.fields_with_errors() == {"belt_width_in"}


class TestParameterValidator:
    """Sanity checks on merged parameters."""

    def test_defaults_are_valid(self, parameters: CalculationParameters) -> None:
        """Default parameters pass."""
        assert ParameterValidator().check(parameters).is_valid

    def test_bad_parameters(self) -> None:
        """Each broken parameter is reported."""
        params = CalculationParameters(
            friction_coeff=1.5, safety_factor=0.5, motor_rpm=0.0, gravity_in_per_s2=0.0
        )
        result = ParameterValidator().check(params)

        assert result.fields_with_errors() == {
            "friction_coeff",
            "safety_factor",
            "motor_rpm",
            "gravity_in_per_s2",
        }


class TestTrackingValidator:
    """Tracking advisories in validation."""

    @pytest.fixture
    def check(self, parameters: CalculationParameters, belt_product: ProductProfile):
        def _check(inputs: ConveyorInputs) -> ValidationResult:
            return TrackingValidator().validate(inputs, parameters, belt_product)

        return _check

    def test_low_risk_is_silent(self, check, baseline_inputs: ConveyorInputs) -> None:
        """Low risk gives no findings."""
        assert check(baseline_inputs).warnings == []

    def test_medium_risk_summary(self, check, baseline_inputs: ConveyorInputs) -> None:
        """Medium risk adds a summary warning."""
        inputs = baseline_inputs.with_changes(environment_factors=EnvironmentFactors.WASHDOWN)
        result = check(inputs)

        assert [(w.field, w.message) for w in result.warnings] == [
            (
                "belt_tracking_method",
                "Tracking risk is Medium. "
                "V-guided tracking is recommended for improved reliability.",
            )
        ]
        assert result.is_valid

    def test_high_risk_includes_advisor_warnings(
        self, check, baseline_inputs: ConveyorInputs
    ) -> None:
        """Advisor warnings follow the summary."""
        result = check(baseline_inputs.with_changes(direction_mode=DirectionMode.REVERSING))

        assert result.warnings[0].message.startswith("Tracking risk is High.")
        assert len(result.warnings) == 2
        assert all(w.severity == Severity.WARNING for w in result.warnings)

    def test_v_guided_is_silent(self, check, baseline_inputs: ConveyorInputs) -> None:
        """Selecting a V-guide settles the advisory."""
        inputs = baseline_inputs.with_changes(
            direction_mode=DirectionMode.REVERSING,
            belt_tracking_method=BeltTrackingMethod.V_GUIDED,
            v_guide_key="K10",
        )
        assert check(inputs).warnings == []
