"""Shared constants for conveyor configuration schemas."""

# Supported schema versions for configuration files
# Version 1.0: Initial schema with inputs, parameter overrides and BOM request
# Version 1.1: Drive arrangement, frame height and shaft sizing inputs
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

DEFAULT_PRODUCT_KEY = "belt_conveyor_v1"
