"""In-memory vendor component catalog."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from conveyors.contracts.catalog import VendorComponent
from conveyors.domain.value_objects import ComponentType

logger = logging.getLogger(__name__)


class InMemoryVendorCatalog:
    """Vendor catalog backed by a list of rows.

    Rows are matched by vendor, component type and metadata equality. The
    catalog is read-only once built.

    Example:
        ```python
        catalog = InMemoryVendorCatalog([
            VendorComponent("60691130", "SI63 Gear Unit", ComponentType.GEAR_UNIT,
                            metadata={"gear_unit_size": "SI63", "ratio": 80}),
        ])
        rows = await catalog.find_components("NORD", ComponentType.GEAR_UNIT)
        ```
    """

    def __init__(self, rows: Iterable[VendorComponent] = ()) -> None:
        self._rows: tuple[VendorComponent, ...] = tuple(rows)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> tuple[VendorComponent, ...]:
        return self._rows

    async def find_components(
        self,
        vendor: str,
        component_type: ComponentType,
        filters: Mapping[str, Any] | None = None,
    ) -> list[VendorComponent]:
        filters = filters or {}
        found = [
            row
            for row in self._rows
            if row.vendor == vendor
            and row.component_type == component_type
            and row.matches(filters)
        ]
        logger.debug(f"{vendor} {component_type.value} {dict(filters)}: {len(found)} row(s)")
        return found
