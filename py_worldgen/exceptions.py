"""
Error conditions raised by the world generator.

Three distinct conditions are surfaced to callers:
- InvalidArgumentError: the input is malformed or outside its domain
- NotFoundError: a referenced catalog entry does not exist
- UnsupportedError: the requested combination is not implemented

None of them are transient, so nothing in the package retries.
"""


class WorldGenError(Exception):
    """Base class for all world generation errors."""


class InvalidArgumentError(WorldGenError, ValueError):
    """Raised when an argument is malformed or out of range."""


class NotFoundError(WorldGenError, LookupError):
    """Raised when a named entity cannot be found in a catalog."""


class UnsupportedError(WorldGenError, NotImplementedError):
    """Raised when a body type, feature or map is not supported."""
