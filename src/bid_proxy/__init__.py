# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Bid Proxy - OpenRTB auction proxy arbitrating between PubMatic and Jio."""

__version__ = "0.1.0"
