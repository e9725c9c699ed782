"""
Exception types raised by pointgeom.
"""


class GeometryError(Exception):
    """Base error for the package."""


class InvalidDimension(GeometryError, ValueError):
    """A coordinate vector has the wrong length for the target type."""

    def __init__(self, type_name: str, expected: int, actual: int):
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{type_name} requires a vector of dimension {expected}, got {actual}"
        )


class ArchiveError(GeometryError, ValueError):
    """A persisted record cannot be decoded."""


class ConfigError(GeometryError):
    """Configuration file is unreadable or holds invalid values."""


class EqualityAssertionError(GeometryError, AssertionError):
    """Raised by assert_equal when two values differ beyond tolerance."""
