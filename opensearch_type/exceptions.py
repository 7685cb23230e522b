"""Error taxonomy for type-level document operations.

Transport failures are opensearch-py's own ``TransportError`` hierarchy and
are re-exported here so callers can catch everything from one module.
"""

from opensearchpy.exceptions import TransportError


class OpenSearchTypeError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(OpenSearchTypeError):
    """An operation needs configuration that is not set (e.g. a serializer)."""


class ValidationError(OpenSearchTypeError):
    """Caller-supplied data is missing a required field."""


class ArgumentError(OpenSearchTypeError, ValueError):
    """A caller-supplied identifier is empty or blank."""


class NotFoundError(OpenSearchTypeError, LookupError):
    """The targeted document does not exist."""


__all__ = [
    "OpenSearchTypeError",
    "ConfigurationError",
    "ValidationError",
    "ArgumentError",
    "NotFoundError",
    "TransportError",
]
