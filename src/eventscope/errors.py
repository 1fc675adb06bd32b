"""Eventscope exception types.

Errors raised by the store client itself (transport failures, timeouts,
malformed server responses) are not wrapped here. They propagate to the
caller exactly as the client raised them.
"""


class EventscopeError(Exception):
    """Base class for errors raised by Eventscope."""


class ParseError(EventscopeError, ValueError):
    """A required enum field was missing or held an unknown value."""


class NumberFormatError(EventscopeError, ValueError):
    """A numeric field could not be parsed as an integer."""


class StoreNotConnectedError(EventscopeError, RuntimeError):
    """A query was issued before the store client connected."""
