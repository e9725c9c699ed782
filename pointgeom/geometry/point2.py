"""
2D point as an additive Lie group.

A Point2 is immutable: every operation returns a new value.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from ..core.coordinates import as_coordinates, divide_coordinates, format_coordinates, within_tolerance
from ..core.jacobians import Linearization, linear_jacobian, linearize


@dataclass(frozen=True)
class Point2:
    """
    A 2D point (x, y).

    Group structure: compose is addition, inverse is negation and the
    identity is (0, 0). Expmap/Logmap are identity embeddings of R^2.
    """
    x: float = 0.0
    y: float = 0.0

    dimension: ClassVar[int] = 2

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_vector(cls, v) -> 'Point2':
        """Create from a length-2 vector; raises InvalidDimension otherwise."""
        x, y = as_coordinates(v, cls.dimension, cls.__name__)
        return cls(x, y)

    @classmethod
    def identity(cls) -> 'Point2':
        return cls()

    @classmethod
    def Dim(cls) -> int:
        return cls.dimension

    def dim(self) -> int:
        """Size of the tangent space."""
        return self.dimension

    def vector(self) -> np.ndarray:
        """Coordinates [x, y]."""
        return np.array([self.x, self.y])

    # Testable

    def print(self, s: str = ""):
        print(f"{s}{self}")

    def equals(self, q: 'Point2', tol: Optional[float] = None) -> bool:
        """True if both coordinates differ by at most ``tol``."""
        return within_tolerance((self.x, self.y), (q.x, q.y), tol)

    def equals_exact(self, q: 'Point2') -> bool:
        return self.x == q.x and self.y == q.y

    # Lie group

    def compose(self, p: 'Point2') -> 'Point2':
        """Adds the coordinates of two points."""
        return self.add(p)

    def inverse(self) -> 'Point2':
        """Negates each coordinate so that compose(p, inverse(p)) == Point2()."""
        return self.negate()

    def between(self, p: 'Point2') -> 'Point2':
        """``p`` relative to this point: p - self."""
        return p.subtract(self)

    @classmethod
    def expmap(cls, v) -> 'Point2':
        """Exponential map around identity: a Point2 with coordinates v."""
        return cls.from_vector(v)

    @staticmethod
    def logmap(p: 'Point2') -> np.ndarray:
        """Log map around identity: the coordinates of p."""
        return p.vector()

    # Arithmetic

    def add(self, q: 'Point2') -> 'Point2':
        return Point2(self.x + q.x, self.y + q.y)

    def subtract(self, q: 'Point2') -> 'Point2':
        return Point2(self.x - q.x, self.y - q.y)

    def scale(self, s: float) -> 'Point2':
        return Point2(self.x * s, self.y * s)

    def divide(self, s: float) -> 'Point2':
        """Divide by a scalar; s == 0 yields inf/nan coordinates."""
        x, y = divide_coordinates((self.x, self.y), s)
        return Point2(x, y)

    def negate(self) -> 'Point2':
        return Point2(-self.x, -self.y)

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def dist(self, p2: 'Point2') -> float:
        """Distance to another point."""
        return p2.subtract(self).norm()

    def __add__(self, q: 'Point2') -> 'Point2':
        return self.add(q)

    def __sub__(self, q: 'Point2') -> 'Point2':
        return self.subtract(q)

    def __mul__(self, s: float) -> 'Point2':
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> 'Point2':
        return self.divide(s)

    def __neg__(self) -> 'Point2':
        return self.negate()

    def __str__(self) -> str:
        return format_coordinates((self.x, self.y))


def compose(p1: Point2, p2: Point2) -> Point2:
    return p1.compose(p2)


def compose_with_jacobians(p1: Point2, p2: Point2, H1: bool = True, H2: bool = True) -> Linearization:
    """Compose and return the requested 2x2 Jacobians (both identity)."""
    return linearize(p1.compose(p2), Point2.dimension, (1.0, 1.0), H1, H2)


def dcompose1(p1: Point2, p2: Point2) -> np.ndarray:
    return linear_jacobian(1.0, Point2.dimension)


def dcompose2(p1: Point2, p2: Point2) -> np.ndarray:
    return linear_jacobian(1.0, Point2.dimension)


def between(p1: Point2, p2: Point2) -> Point2:
    """Subtracts point coordinates: p2 - p1."""
    return p1.between(p2)


def between_with_jacobians(p1: Point2, p2: Point2, H1: bool = True, H2: bool = True) -> Linearization:
    """between with Jacobians -I (w.r.t. p1) and I (w.r.t. p2)."""
    return linearize(p1.between(p2), Point2.dimension, (-1.0, 1.0), H1, H2)


def dbetween1(p1: Point2, p2: Point2) -> np.ndarray:
    return linear_jacobian(-1.0, Point2.dimension)


def dbetween2(p1: Point2, p2: Point2) -> np.ndarray:
    return linear_jacobian(1.0, Point2.dimension)


def norm(p: Point2) -> float:
    return p.norm()


def dnorm(p: Point2) -> np.ndarray:
    """
    Gradient of the norm as a 1x2 row, p^T / |p|.

    The norm is not differentiable at the origin; zeros are returned there.
    """
    n = p.norm()
    if n == 0.0:
        return np.zeros((1, Point2.dimension))
    return (p.vector() / n).reshape(1, Point2.dimension)


def dist(p1: Point2, p2: Point2) -> float:
    return p1.dist(p2)
