"""Severity and risk vocabulary shared by validation and advisory output."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of a validation message.

    Attributes:
        ERROR: Blocking. The configuration must not be treated as valid.
        WARNING: Advisory. Computation and ordering may proceed.
        INFO: Informational note only.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class TrackingRiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
