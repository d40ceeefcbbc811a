"""CLI command implementations for the conveyors application.

This package contains subcommands for the conveyors CLI, including:
- validate: Validate a configuration file
"""

from conveyors.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
