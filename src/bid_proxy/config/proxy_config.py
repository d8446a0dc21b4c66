# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Immutable proxy configuration.

`Settings` is read from the environment. `ProxyConfig` is the frozen value
built from it once at startup and passed by reference into the auction
core, so tests can inject their own fixtures without touching globals.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigurationError
from .settings import Settings, get_settings


DEFAULT_SLOT_MAPPINGS: dict[str, dict[str, str]] = {
    "com.truecaller": {
        "banner": "6931445",
        "video": "6931468",
        "native": "6931469",
    },
    "com.snapchat.android": {
        "banner": "snap_banner_slot_01",
        "video": "snap_video_slot_02",
        "native": "snap_native_slot_03",
    },
}

DEFAULT_FALLBACK_SLOTS: dict[str, str] = {
    "banner": "default_banner_slot",
    "video": "default_video_slot",
    "native": "default_native_slot",
}


class SlotMappings(BaseModel):
    """Bundle → ad type → slot table plus per-ad-type fallbacks."""

    model_config = ConfigDict(frozen=True)

    bundles: dict[str, dict[str, str]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_SLOT_MAPPINGS.items()}
    )
    fallback: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_FALLBACK_SLOTS))


class ProxyConfig(BaseModel):
    """Read-only configuration consumed by the auction core."""

    model_config = ConfigDict(frozen=True)

    publisher_id: str = ""
    prebid_auction_url: str = "http://localhost:8000/openrtb2/auction"
    jio_dsp_url: str = "https://mercury-dsp.jio.com/jiodsp/?spid=51"
    jio_ssp: str = "abc"
    jio_spid: str = "51"
    downstream_timeout: Optional[float] = None
    slots: SlotMappings = Field(default_factory=SlotMappings)


def load_slot_mappings(path: str) -> SlotMappings:
    """Load slot tables from a JSON file.

    Args:
        path: Path to a JSON document with "bundles" and "fallback" objects

    Raises:
        ConfigurationError: If the file is missing or does not match the schema
    """
    try:
        return SlotMappings.model_validate_json(Path(path).read_bytes())
    except OSError as e:
        raise ConfigurationError(f"Cannot read slot mappings file {path}: {e}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid slot mappings file {path}: {e}") from e


def load_proxy_config(settings: Optional[Settings] = None) -> ProxyConfig:
    """Build the immutable proxy configuration from settings."""
    settings = settings or get_settings()

    slots = SlotMappings()
    if settings.slot_mappings_file:
        slots = load_slot_mappings(settings.slot_mappings_file)

    return ProxyConfig(
        publisher_id=settings.publisher_id,
        prebid_auction_url=settings.prebid_auction_url,
        jio_dsp_url=settings.jio_dsp_url,
        jio_ssp=settings.jio_ssp,
        jio_spid=settings.jio_spid,
        downstream_timeout=settings.downstream_timeout,
        slots=slots,
    )
