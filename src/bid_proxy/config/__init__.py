# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Configuration module."""

from .log_setup import configure_logging
from .proxy_config import (
    DEFAULT_FALLBACK_SLOTS,
    DEFAULT_SLOT_MAPPINGS,
    ProxyConfig,
    SlotMappings,
    load_proxy_config,
    load_slot_mappings,
)
from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "ProxyConfig",
    "SlotMappings",
    "DEFAULT_SLOT_MAPPINGS",
    "DEFAULT_FALLBACK_SLOTS",
    "load_proxy_config",
    "load_slot_mappings",
    "configure_logging",
]
