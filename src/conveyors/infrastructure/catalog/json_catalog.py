"""Load a vendor component catalog from a JSON file.

The file is either a list of rows or an object with a "components" list.
Each row looks like::

    {
        "vendor_part_number": "60691130",
        "description": "NORD FLEXBLOC SI63 Gear Unit i=80",
        "component_type": "gear_unit",
        "vendor": "NORD",
        "metadata": {"gear_unit_size": "SI63", "ratio": 80, "mounting_variant": "inch_hollow"}
    }
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from conveyors.application.config import ConfigError, read_json_file, validation_error
from conveyors.contracts.catalog import VendorComponent
from conveyors.domain.value_objects import ComponentType

from .memory import InMemoryVendorCatalog

logger = logging.getLogger(__name__)


class VendorComponentRecord(BaseModel):
    """Schema of one catalog row in a JSON catalog file."""

    model_config = ConfigDict(extra="forbid")

    vendor_part_number: str = Field(..., min_length=1)
    description: str | None = None
    component_type: ComponentType
    vendor: str = "NORD"
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_component(self) -> VendorComponent:
        return VendorComponent(
            vendor_part_number=self.vendor_part_number,
            description=self.description,
            component_type=self.component_type,
            vendor=self.vendor,
            metadata=dict(self.metadata),
        )


_RECORDS = TypeAdapter(list[VendorComponentRecord])


def catalog_from_data(data: Any, path: Path | None = None) -> InMemoryVendorCatalog:
    """Build a catalog from parsed JSON data.

    Raises:
        ConfigError: If the data is not a list of valid rows.
    """
    if isinstance(data, dict):
        data = data.get("components")
    if not isinstance(data, list):
        raise ConfigError(
            message="Catalog must be a JSON list of components or an object with a 'components' list",
            error_type="validation",
            path=path,
        )

    try:
        records = _RECORDS.validate_python(data)
    except PydanticValidationError as e:
        raise validation_error(e, path)

    return InMemoryVendorCatalog(record.to_component() for record in records)


def load_catalog(path: Path) -> InMemoryVendorCatalog:
    """Load a vendor component catalog from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    catalog = catalog_from_data(read_json_file(path), path)
    logger.debug(f"Loaded {len(catalog)} catalog row(s) from {path}")
    return catalog
