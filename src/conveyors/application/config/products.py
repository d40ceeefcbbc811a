"""Product profiles.

A product profile names the product family that wording is rendered for
and lists the capabilities that product-gated rules require. Rules never
branch on a product key directly; they declare a capability and the
validation engine filters them per profile.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# Capability names
PREMIUM_FLAGS = "premium_flags"


@dataclass(frozen=True)
class ProductProfile:
    """Capability descriptor for one product family.

    Attributes:
        key: Product/model key, e.g. "belt_conveyor_v1".
        display_name: Lower-case product name used inside messages.
        model_version_id: Version identifier attached to calculation results.
        capabilities: Capability names that gate optional rules.
    """

    key: str
    display_name: str
    model_version_id: str
    capabilities: frozenset[str] = field(default_factory=frozenset)

    @property
    def title_name(self) -> str:
        """Display name with the first letter capitalized."""
        return self.display_name[:1].upper() + self.display_name[1:]

    def has(self, capability: str) -> bool:
        return capability in self.capabilities


BELT_CONVEYOR = ProductProfile(
    key="belt_conveyor_v1",
    display_name="belt conveyor",
    model_version_id="belt_conveyor_v1.12",
    capabilities=frozenset({PREMIUM_FLAGS}),
)

SLIDERBED_CONVEYOR = ProductProfile(
    key="sliderbed_conveyor_v1",
    display_name="sliderbed conveyor",
    model_version_id="sliderbed_conveyor_v1.12",
)

PRODUCT_PROFILES: dict[str, ProductProfile] = {
    profile.key: profile for profile in (BELT_CONVEYOR, SLIDERBED_CONVEYOR)
}


def get_product_profile(product_key: str | None) -> ProductProfile:
    """Look up a product profile, falling back to generic conveyor wording.

    Args:
        product_key: Product/model key. None selects the belt conveyor.

    Returns:
        The registered profile, or a generic profile without optional
        capabilities for an unknown key.
    """
    if product_key is None:
        return BELT_CONVEYOR
    profile = PRODUCT_PROFILES.get(product_key)
    if profile is None:
        logger.warning(f"Unknown product key '{product_key}', using generic conveyor profile")
        return ProductProfile(
            key=product_key,
            display_name="conveyor",
            model_version_id=BELT_CONVEYOR.model_version_id,
        )
    return profile
