"""Configuration loading, normalization, merging and validation.

This module provides:
- Pydantic schemas for JSON configuration files
- A loader that reports file, JSON and schema problems as ConfigError
- Legacy field normalization and parameter merging
- Product profiles and the conveyor validators
"""

from conveyors.application.config.adapter import (
    config_to_bom_context,
    config_to_inputs,
    config_to_parameters,
)
from conveyors.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_inputs_from_dict,
    read_json_file,
    validation_error,
)
from conveyors.application.config.merger import (
    DEFAULT_PARAMETERS,
    default_parameters,
    merge_config_with_cli,
    merge_parameters,
)
from conveyors.application.config.normalization import (
    LEGACY_INPUT_ALIASES,
    normalize_configuration,
    normalize_inputs,
)
from conveyors.application.config.products import (
    PREMIUM_FLAGS,
    PRODUCT_PROFILES,
    ProductProfile,
    get_product_profile,
)
from conveyors.application.config.schemas import (
    SUPPORTED_VERSIONS,
    BomRequestConfig,
    ConveyorConfiguration,
    ConveyorInputsConfig,
    ParameterOverridesConfig,
)

__all__ = [
    # Schemas
    "SUPPORTED_VERSIONS",
    "BomRequestConfig",
    "ConveyorConfiguration",
    "ConveyorInputsConfig",
    "ParameterOverridesConfig",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_inputs_from_dict",
    "read_json_file",
    "validation_error",
    # Normalization and merging
    "LEGACY_INPUT_ALIASES",
    "normalize_configuration",
    "normalize_inputs",
    "DEFAULT_PARAMETERS",
    "default_parameters",
    "merge_config_with_cli",
    "merge_parameters",
    # Products
    "PREMIUM_FLAGS",
    "PRODUCT_PROFILES",
    "ProductProfile",
    "get_product_profile",
    # Adapter
    "config_to_bom_context",
    "config_to_inputs",
    "config_to_parameters",
]
