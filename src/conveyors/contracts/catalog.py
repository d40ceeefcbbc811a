"""Vendor component catalog contract.

The BOM resolver reads vendor part numbers through this protocol and never
writes to it. Implementations may be backed by a database, a JSON file or an
in-memory table; the resolver only relies on the query surface below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from conveyors.domain.value_objects import ComponentType


@dataclass(frozen=True)
class VendorComponent:
    """One row of the vendor component table.

    Attributes:
        vendor_part_number: Part number as published by the vendor. May be an
            internal placeholder key in poorly curated tables.
        description: Vendor description text.
        component_type: Which gearmotor component this row describes.
        vendor: Vendor name (e.g., "NORD").
        metadata: Lookup keys such as gear_unit_size, ratio, mounting_variant,
            adapter_code, motor_frame, motor_hp, output_shaft_option,
            shaft_style or shaft_diameter_in.
    """

    vendor_part_number: str
    description: str | None
    component_type: ComponentType
    vendor: str = "NORD"
    metadata: dict[str, Any] = field(default_factory=dict)

    def matches(self, filters: Mapping[str, Any]) -> bool:
        """Whether every filter key is present in metadata with an equal value."""
        return all(
            key in self.metadata and self.metadata[key] == value
            for key, value in filters.items()
        )


@runtime_checkable
class VendorCatalog(Protocol):
    """Read-only query surface over vendor component rows.

    Example:
        ```python
        class MyCatalog:
            async def find_components(self, vendor, component_type, filters=None):
                return [row for row in rows if row.matches(filters or {})]
        ```
    """

    async def find_components(
        self,
        vendor: str,
        component_type: ComponentType,
        filters: Mapping[str, Any] | None = None,
    ) -> list[VendorComponent]:
        """Return rows for a vendor and component type whose metadata matches.

        Args:
            vendor: Vendor name.
            component_type: Component type to search.
            filters: Metadata fields that must compare equal. None or an
                empty mapping returns every row of the type.

        Returns:
            Matching rows, possibly empty. Order is not significant.
        """
        ...
