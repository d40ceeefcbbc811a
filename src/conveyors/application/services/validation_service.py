"""Validation entry points.

Thin functions over the validator classes for callers that want one tier
of validation at a time. validate() composes all of them through the
default registry.
"""

from __future__ import annotations

from conveyors.application.config.merger import default_parameters
from conveyors.application.config.products import get_product_profile
from conveyors.application.config.validators import (
    DomainRulesValidator,
    ParameterValidator,
    StructuralValidator,
    ValidationMessage,
    ValidationResult,
    default_registry,
)
from conveyors.domain.entities import CalculationParameters, ConveyorInputs


def validate_structural(inputs: ConveyorInputs) -> list[ValidationMessage]:
    """Field range and presence errors for the inputs."""
    result = StructuralValidator().validate(
        inputs, default_parameters(None), get_product_profile(None)
    )
    return result.errors


def validate_parameters(parameters: CalculationParameters) -> list[ValidationMessage]:
    """Sanity errors for merged calculation parameters."""
    return ParameterValidator().check(parameters).errors


def apply_domain_rules(inputs: ConveyorInputs, product_key: str | None = None) -> ValidationResult:
    """Application rule findings, rendered for the given product."""
    product = get_product_profile(product_key)
    return DomainRulesValidator().validate(inputs, default_parameters(product_key), product)


def validate(
    inputs: ConveyorInputs,
    parameters: CalculationParameters,
    product_key: str | None = None,
) -> ValidationResult:
    """Run structural, parameter, application rule and tracking checks.

    Args:
        inputs: Canonical configuration inputs.
        parameters: Merged calculation parameters.
        product_key: Product family for wording and gated rules.

    Returns:
        ValidationResult with every finding; nothing is short-circuited.
    """
    return default_registry().validate_all(inputs, parameters, get_product_profile(product_key))
