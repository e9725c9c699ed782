"""
Capability contracts shared by all point types.

Optimization code depends on these protocols only. A type satisfies them
structurally; no base class is involved.
"""
from typing import Optional, Protocol, runtime_checkable

import numpy as np

from .errors import EqualityAssertionError


@runtime_checkable
class Testable(Protocol):
    """Values that can be printed and compared with a tolerance."""

    def print(self, s: str = "") -> None:
        ...

    def equals(self, other, tol: Optional[float] = None) -> bool:
        ...


@runtime_checkable
class LieElement(Protocol):
    """
    Element of a Lie group with tangent-space coordinates.

    Requirements:
    - dim(): size of the tangent space
    - compose(other), inverse()
    - expmap(v) (classmethod) and logmap(p) (staticmethod) around identity
    - vector(): coordinates in canonical field order
    """

    dimension: int

    def dim(self) -> int:
        ...

    def compose(self, other):
        ...

    def inverse(self):
        ...

    @classmethod
    def expmap(cls, v: np.ndarray):
        ...

    @staticmethod
    def logmap(p) -> np.ndarray:
        ...

    def vector(self) -> np.ndarray:
        ...


def assert_equal(expected: Testable, actual: Testable, tol: Optional[float] = None) -> bool:
    """
    Check two Testable values for equality, printing both when they differ.

    Raises:
        EqualityAssertionError: if ``actual`` is not equal to ``expected``
    """
    if expected.equals(actual, tol):
        return True
    print("Not equal:")
    expected.print("expected = ")
    actual.print("actual = ")
    raise EqualityAssertionError(f"expected {expected}, got {actual}")


def assert_not_equal(expected: Testable, actual: Testable, tol: Optional[float] = None) -> bool:
    """Inverse of assert_equal."""
    if not expected.equals(actual, tol):
        return True
    print("Erroneously equal:")
    expected.print("expected = ")
    actual.print("actual = ")
    raise EqualityAssertionError(f"{expected} unexpectedly equals {actual}")
