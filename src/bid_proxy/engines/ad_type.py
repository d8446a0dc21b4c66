"""Ad type classification for OpenRTB impressions."""

from ..models.auction import AdType
from ..models.openrtb import BidRequest, Impression

# Checked in this order; the first member present wins.
AD_TYPE_PRIORITY = (AdType.VIDEO, AdType.BANNER, AdType.NATIVE)


def classify_ad_type(impression: Impression) -> AdType:
    """Return the declared format of an impression.

    Only the presence of the `video`, `banner` or `native` member counts,
    not its value.
    """
    for ad_type in AD_TYPE_PRIORITY:
        if impression.has_member(ad_type.value):
            return ad_type
    return AdType.UNKNOWN


def detect_ad_types(request: BidRequest) -> list[AdType]:
    """Classify every object impression of a request, in document order."""
    return [classify_ad_type(imp) for imp in request.impressions]
