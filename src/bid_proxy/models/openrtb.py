# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""OpenRTB bid request records.

Only the members the proxy reads or rewrites are typed:
- imp[].video / imp[].banner / imp[].native (presence only)
- imp[].ext.prebid.bidder.pubmatic
- app.bundle
- top-level ext

Every model allows extra members, so anything the proxy does not know
about is carried through parse -> mutate -> serialize untouched. Typed
members that arrive in an unexpected shape (an `imp` that is not a list,
an `ext` that is a string) fall back to the raw JSON value instead of
failing validation. Serialization uses `exclude_unset` so members that
were never sent are never invented.
"""

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PubmaticParams(BaseModel):
    """PubMatic bidder parameters for a Prebid Server impression."""

    model_config = ConfigDict(extra="allow")

    publisher_id: str = Field(alias="publisherId")
    ad_slot: str = Field(alias="adSlot")


class BidderExt(BaseModel):
    """imp[].ext.prebid.bidder - one entry per Prebid bidder."""

    model_config = ConfigDict(extra="allow")

    pubmatic: Union[PubmaticParams, Any] = Field(default=None, union_mode="left_to_right")


class PrebidExt(BaseModel):
    """imp[].ext.prebid"""

    model_config = ConfigDict(extra="allow")

    bidder: Union[BidderExt, Any] = Field(default=None, union_mode="left_to_right")


class ImpressionExt(BaseModel):
    """imp[].ext"""

    model_config = ConfigDict(extra="allow")

    prebid: Union[PrebidExt, Any] = Field(default=None, union_mode="left_to_right")


class Impression(BaseModel):
    """One ad placement opportunity.

    The format objects are kept as raw JSON; only whether they were sent
    matters (see `has_member`).
    """

    model_config = ConfigDict(extra="allow")

    video: Any = None
    banner: Any = None
    native: Any = None
    ext: Union[ImpressionExt, Any] = Field(default=None, union_mode="left_to_right")

    def has_member(self, name: str) -> bool:
        """Whether the member was present in the document, even as null."""
        return name in self.model_fields_set


class App(BaseModel):
    """Top-level app object."""

    model_config = ConfigDict(extra="allow")

    bundle: Any = None


class RequestExt(BaseModel):
    """Top-level ext object."""

    model_config = ConfigDict(extra="allow")

    ssp: Any = None
    spid: Any = None


ImpressionItem = Annotated[Union[Impression, Any], Field(union_mode="left_to_right")]


class BidRequest(BaseModel):
    """An inbound OpenRTB auction request."""

    model_config = ConfigDict(extra="allow")

    imp: Union[list[ImpressionItem], Any] = Field(default=None, union_mode="left_to_right")
    app: Union[App, Any] = Field(default=None, union_mode="left_to_right")
    ext: Union[RequestExt, Any] = Field(default=None, union_mode="left_to_right")

    @property
    def bundle(self) -> Optional[str]:
        """The app bundle identifier, if the request carries a string one."""
        if isinstance(self.app, App) and isinstance(self.app.bundle, str):
            return self.app.bundle
        return None

    @property
    def impressions(self) -> list[Impression]:
        """Impressions that are proper objects, in document order."""
        if not isinstance(self.imp, list):
            return []
        return [imp for imp in self.imp if isinstance(imp, Impression)]

    def to_document(self) -> dict[str, Any]:
        """Dump back to plain JSON-compatible data, wire names included."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
