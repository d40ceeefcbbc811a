"""Conveyor calculation, validation and component-resolution engine."""

__version__ = "1.0.0"
