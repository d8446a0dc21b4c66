# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Downstream clients for Prebid Server and the Jio DSP."""

from .dispatcher import Dispatcher
from .dsp_client import DownstreamClient

__all__ = [
    "Dispatcher",
    "DownstreamClient",
]
