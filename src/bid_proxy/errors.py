# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Exceptions raised by the Bid Proxy.

Only failures that end an auction are exceptions. Downstream transport
errors and bid responses without a usable price are logged and degrade to
a price of zero instead.
"""


class ProxyError(Exception):
    """Base class for Bid Proxy errors."""


class MalformedRequestError(ProxyError):
    """The inbound body is not a JSON object."""


class RequestSerializationError(ProxyError):
    """A transformed request could not be serialized for dispatch."""


class ConfigurationError(ProxyError):
    """Static configuration could not be loaded."""
