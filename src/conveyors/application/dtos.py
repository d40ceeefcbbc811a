"""Data transfer objects for application commands."""

from __future__ import annotations

from dataclasses import dataclass

from conveyors.domain.services.bom import BomResolution


@dataclass(frozen=True)
class BomOutput:
    """A resolved gearmotor BOM with the selection notes shown alongside it.

    Attributes:
        resolution: Per-component resolution.
        applied_sf: Service factor applied to the selection.
        catalog_sf: Service factor published in the catalog.
        catalog_page: Catalog page reference, when known.
    """

    resolution: BomResolution
    applied_sf: float = 1.0
    catalog_sf: float = 1.0
    catalog_page: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.resolution.complete

    @property
    def exit_code(self) -> int:
        """0 when every component is orderable or not required, else 2."""
        return 0 if self.is_complete else 2
