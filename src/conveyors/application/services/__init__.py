"""Application services."""

from .validation_service import (
    apply_domain_rules,
    validate,
    validate_parameters,
    validate_structural,
)

__all__ = [
    "apply_domain_rules",
    "validate",
    "validate_parameters",
    "validate_structural",
]
