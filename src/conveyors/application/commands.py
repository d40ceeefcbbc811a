"""Application commands (use cases) for gearmotor BOM resolution."""

from __future__ import annotations

import logging

from conveyors.application.config import BomRequestConfig, config_to_bom_context
from conveyors.contracts.catalog import VendorCatalog
from conveyors.domain.services.bom import BomResolver

from .dtos import BomOutput

logger = logging.getLogger(__name__)


class ResolveBomCommand:
    """Command to resolve a gearmotor selection into orderable part numbers.

    The command never raises for missing catalog rows; unresolved components
    come back as Missing or Configured outcomes on the resolution.
    """

    def __init__(self, catalog: VendorCatalog, resolver: BomResolver | None = None) -> None:
        self.catalog = catalog
        self.resolver = resolver or BomResolver(catalog)

    async def execute(self, request: BomRequestConfig) -> BomOutput:
        """Resolve the BOM for one gearmotor selection.

        Args:
            request: Validated BOM request.

        Returns:
            BomOutput with the resolution and the service factor notes.
        """
        context = config_to_bom_context(request)
        resolution = await self.resolver.resolve(request.model_type, request.motor_hp, context)
        if not resolution.complete:
            unresolved = [
                c.component_type.value for c in resolution.components if not c.found
            ]
            logger.info(f"BOM for {request.model_type!r} incomplete: {', '.join(unresolved)}")
        return BomOutput(
            resolution=resolution,
            applied_sf=request.applied_sf,
            catalog_sf=request.catalog_sf,
            catalog_page=request.catalog_page,
        )
