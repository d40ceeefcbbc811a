"""Validators subpackage - modular validators for conveyor configurations.

This package provides focused validator classes organized by validation domain:
- StructuralValidator: Field ranges and presence requirements
- ParameterValidator: Merged calculation parameters
- DomainRulesValidator: Product-templated application rule table
- TrackingValidator: Belt tracking risk advisories

The ValidatorRegistry runs them in order against one configuration.
"""

from .base import ValidationMessage, ValidationResult
from .parameters import ParameterValidator
from .registry import ValidatorRegistry, default_registry
from .rules import DOMAIN_RULES, DomainRule, DomainRulesValidator, incline_band
from .structural import StructuralValidator
from .tracking import TrackingValidator

__all__ = [
    # Base classes
    "ValidationMessage",
    "ValidationResult",
    # Registry
    "ValidatorRegistry",
    "default_registry",
    # Validators
    "DomainRulesValidator",
    "ParameterValidator",
    "StructuralValidator",
    "TrackingValidator",
    # Rule table
    "DOMAIN_RULES",
    "DomainRule",
    "incline_band",
]
