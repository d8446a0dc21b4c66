# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Request Transformer - per-destination rewrites of an auction request.

Builds, from one parsed inbound request, the two downstream bodies:
- PubMatic (via Prebid Server): bidder params injected into every impression
- Jio DSP: ssp/spid injected into the top-level ext

Each destination gets its own deep copy of the parsed request, so neither
rewrite can leak into the other.
"""

import json
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..config.proxy_config import ProxyConfig
from ..errors import MalformedRequestError, RequestSerializationError
from ..models.auction import Destination, DownstreamRequest
from ..models.openrtb import (
    BidderExt,
    BidRequest,
    Impression,
    ImpressionExt,
    PrebidExt,
    PubmaticParams,
    RequestExt,
)
from .ad_type import classify_ad_type
from .slot_resolver import SlotResolver

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_request(body: Union[bytes, str]) -> BidRequest:
    """Parse an inbound body into a BidRequest.

    NaN, Infinity and -Infinity are rejected rather than read as numbers.

    Raises:
        MalformedRequestError: If the body is not a JSON object
    """
    try:
        document = json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedRequestError(f"Invalid JSON in request: {e}") from e

    try:
        return BidRequest.model_validate(document)
    except ValidationError as e:
        raise MalformedRequestError(f"Invalid JSON in request: {e}") from e


def serialize_request(request: BidRequest) -> bytes:
    """Serialize a request to canonical JSON bytes (sorted keys, compact).

    Raises:
        RequestSerializationError: If the document cannot be encoded
    """
    try:
        document = request.to_document()
        return json.dumps(
            document,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise RequestSerializationError(f"Failed to marshal modified request: {e}") from e


def _ensure_bidder_ext(impression: Impression) -> BidderExt:
    """Make imp.ext.prebid.bidder an object, replacing wrong shapes."""
    if not isinstance(impression.ext, ImpressionExt):
        impression.ext = ImpressionExt()
    ext = impression.ext

    if not isinstance(ext.prebid, PrebidExt):
        ext.prebid = PrebidExt()
    prebid = ext.prebid

    if not isinstance(prebid.bidder, BidderExt):
        prebid.bidder = BidderExt()
    return prebid.bidder


class RequestTransformer:
    """Rewrites an auction request for each downstream destination.

    Example:
        transformer = RequestTransformer(config)
        requests = transformer.build(parse_request(body))
    """

    def __init__(
        self,
        config: ProxyConfig,
        resolver: Optional[SlotResolver] = None,
    ) -> None:
        """Initialize the transformer.

        Args:
            config: Immutable proxy configuration
            resolver: Slot resolver, built from config.slots if not given
        """
        self._config = config
        self._resolver = resolver or SlotResolver(config.slots)

    def inject_pubmatic(self, request: BidRequest) -> BidRequest:
        """Set imp[].ext.prebid.bidder.pubmatic on every object impression.

        Impressions that are not objects are left as they are. Other bidders
        under ext.prebid.bidder are kept. Mutates and returns `request`.
        """
        if not isinstance(request.imp, list):
            logger.warning("No 'imp' list found in request")
            return request

        bundle = request.bundle
        for impression in request.impressions:
            ad_type = classify_ad_type(impression)
            slot = self._resolver.resolve(bundle, ad_type)

            bidder = _ensure_bidder_ext(impression)
            bidder.pubmatic = PubmaticParams(
                publisherId=self._config.publisher_id,
                adSlot=slot or "",
            )
            logger.info(f"Injected PubMatic for adType={ad_type.value} with adSlot={slot or ''}")

        return request

    def inject_jio_ext(self, request: BidRequest) -> BidRequest:
        """Set ext.ssp and ext.spid, keeping any other ext members.

        Mutates and returns `request`.
        """
        if not isinstance(request.ext, RequestExt):
            request.ext = RequestExt()
        request.ext.ssp = self._config.jio_ssp
        request.ext.spid = self._config.jio_spid

        logger.info(f"Injected Jio ext: {request.ext.model_dump(exclude_unset=True)}")
        return request

    def build(self, request: BidRequest) -> list[DownstreamRequest]:
        """Build the serialized request for every destination.

        `request` itself is not modified.

        Raises:
            RequestSerializationError: If either body cannot be serialized
        """
        pubmatic_request = self.inject_pubmatic(request.model_copy(deep=True))
        jio_request = self.inject_jio_ext(request.model_copy(deep=True))

        return [
            DownstreamRequest(
                destination=Destination.PUBMATIC,
                url=self._config.prebid_auction_url,
                body=serialize_request(pubmatic_request),
            ),
            DownstreamRequest(
                destination=Destination.JIO,
                url=self._config.jio_dsp_url,
                body=serialize_request(jio_request),
            ),
        ]
