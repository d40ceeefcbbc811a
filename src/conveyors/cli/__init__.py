"""Command-line interface for the conveyor engine."""
