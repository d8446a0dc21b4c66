# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Configuration settings for the Bid Proxy."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Downstream Destinations
    prebid_auction_url: str = "http://localhost:8000/openrtb2/auction"
    jio_dsp_url: str = "https://mercury-dsp.jio.com/jiodsp/?spid=51"
    downstream_timeout: Optional[float] = None  # seconds, httpx default when unset

    # PubMatic Bidder Parameters
    publisher_id: str = ""

    # Jio Extension Parameters
    jio_ssp: str = "abc"
    jio_spid: str = "51"

    # Slot Mappings
    slot_mappings_file: Optional[str] = None  # JSON with "bundles" and "fallback"

    # Logging
    log_file: Optional[str] = "proxy.log"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
