"""Slot resolution by app bundle and ad type."""

from typing import Optional, Union

from ..config.proxy_config import SlotMappings
from ..models.auction import AdType


class SlotResolver:
    """Resolve the PubMatic ad slot for an impression.

    Lookup order:
    1. bundle -> ad type in the bundle table
    2. ad type in the fallback table
    3. None when the ad type has no fallback either

    Example:
        resolver = SlotResolver(config.slots)
        slot = resolver.resolve("com.truecaller", AdType.BANNER)  # "6931445"
    """

    def __init__(self, mappings: SlotMappings) -> None:
        self._mappings = mappings

    @property
    def mappings(self) -> SlotMappings:
        """Get the slot tables."""
        return self._mappings

    def resolve(
        self,
        bundle: Optional[str],
        ad_type: Union[AdType, str],
    ) -> Optional[str]:
        """Return the slot for a bundle and ad type, or None if unmapped."""
        key = ad_type.value if isinstance(ad_type, AdType) else ad_type

        if bundle is not None:
            bundle_slots = self._mappings.bundles.get(bundle, {})
            if key in bundle_slots:
                return bundle_slots[key]

        return self._mappings.fallback.get(key)
