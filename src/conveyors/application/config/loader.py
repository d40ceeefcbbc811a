"""JSON configuration loading.

Every failure on the way from a file to a validated schema object is raised
as a ConfigError whose error_type tells the CLI how to present it:
file_not_found, permission_denied, file_read_error, json_parse or
validation. Pydantic errors are flattened into one detail dict per problem
with a dotted JSON path such as "inputs.belt_width_in".
"""

import json
from pathlib import Path
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from conveyors.application.config.normalization import (
    normalize_configuration,
    normalize_inputs,
)
from conveyors.application.config.schemas import (
    ConveyorConfiguration,
    ConveyorInputsConfig,
)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ConfigError(Exception):
    """A configuration file or mapping could not be turned into a schema.

    Attributes:
        message: Human-readable summary, also the str() of the exception.
        error_type: Failure category (see module docstring).
        path: Source file, when the data came from one.
        details: One dict per problem. JSON errors carry line, column and
            message; validation errors carry path, message, value and
            error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details or [])


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location, e.g. ("bom", "motor_hp") -> "bom.motor_hp"."""
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        else:
            rendered += f".{segment}" if rendered else str(segment)
    return rendered


def validation_error(error: PydanticValidationError, path: Path | None = None) -> ConfigError:
    """Convert a pydantic ValidationError into a ConfigError."""
    details = [
        {
            "path": _json_path(item["loc"]),
            "message": item["msg"],
            "value": item.get("input"),
            "error_type": item["type"],
        }
        for item in error.errors()
    ]
    summary = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail["value"] is not None and not isinstance(detail["value"], Mapping):
            line += f" (got: {detail['value']!r})"
        summary.append(line)
    return ConfigError("\n".join(summary), "validation", path, details)


def _validate(schema: type[SchemaT], data: Any, path: Path | None = None) -> SchemaT:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise validation_error(e, path) from e


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        ConfigError: With error_type file_not_found, permission_denied,
            file_read_error or json_parse.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path) from e
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file: {path}: {e}", "file_read_error", path) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> ConveyorConfiguration:
    """Load and validate a conveyor configuration file.

    Legacy input field names are normalized before validation.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> config = load_config(Path("line-3-infeed.json"))
        >>> inputs = config_to_inputs(config.inputs)
    """
    data = read_json_file(path)
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a JSON object: {path}", "validation", path
        )
    return _validate(ConveyorConfiguration, normalize_configuration(data), path)


def load_config_from_dict(data: Mapping[str, Any]) -> ConveyorConfiguration:
    """Validate an already parsed configuration document."""
    return _validate(ConveyorConfiguration, normalize_configuration(data))


def load_inputs_from_dict(data: Mapping[str, Any]) -> ConveyorInputsConfig:
    """Validate a bare inputs mapping, resolving legacy field names first.

    Raises:
        ConfigError: If the mapping has unknown fields or wrong types.
    """
    return _validate(ConveyorInputsConfig, normalize_inputs(data))
