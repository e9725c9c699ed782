"""
3D point as an additive Lie group, with cross/dot products and the
derivatives used when linearizing measurement functions.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from ..core.coordinates import as_coordinates, divide_coordinates, format_coordinates, within_tolerance
from ..core.jacobians import Linearization, linear_jacobian, linearize, skew_symmetric


@dataclass(frozen=True)
class Point3:
    """
    A 3D point (x, y, z).

    Group structure: compose is addition, inverse is negation and the
    identity is (0, 0, 0). Expmap/Logmap are identity embeddings of R^3.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    dimension: ClassVar[int] = 3

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    @classmethod
    def from_vector(cls, v) -> 'Point3':
        """Create from a length-3 vector; raises InvalidDimension otherwise."""
        x, y, z = as_coordinates(v, cls.dimension, cls.__name__)
        return cls(x, y, z)

    @classmethod
    def identity(cls) -> 'Point3':
        return cls()

    @classmethod
    def Dim(cls) -> int:
        return cls.dimension

    def dim(self) -> int:
        """Degrees of freedom of the tangent space."""
        return self.dimension

    def vector(self) -> np.ndarray:
        """Coordinates [x, y, z]."""
        return np.array([self.x, self.y, self.z])

    # Testable

    def print(self, s: str = ""):
        print(f"{s}{self}")

    def equals(self, q: 'Point3', tol: Optional[float] = None) -> bool:
        return within_tolerance((self.x, self.y, self.z), (q.x, q.y, q.z), tol)

    def equals_exact(self, q: 'Point3') -> bool:
        return self.x == q.x and self.y == q.y and self.z == q.z

    # Lie group

    def compose(self, p: 'Point3') -> 'Point3':
        return self.add(p)

    def inverse(self) -> 'Point3':
        return self.negate()

    def between(self, p: 'Point3') -> 'Point3':
        return p.subtract(self)

    @classmethod
    def expmap(cls, v) -> 'Point3':
        return cls.from_vector(v)

    @staticmethod
    def logmap(p: 'Point3') -> np.ndarray:
        return p.vector()

    # Arithmetic

    def add(self, q: 'Point3') -> 'Point3':
        return Point3(self.x + q.x, self.y + q.y, self.z + q.z)

    def subtract(self, q: 'Point3') -> 'Point3':
        return Point3(self.x - q.x, self.y - q.y, self.z - q.z)

    def scale(self, s: float) -> 'Point3':
        return Point3(self.x * s, self.y * s, self.z * s)

    def divide(self, s: float) -> 'Point3':
        """Divide by a scalar; s == 0 yields inf/nan coordinates."""
        x, y, z = divide_coordinates((self.x, self.y, self.z), s)
        return Point3(x, y, z)

    def negate(self) -> 'Point3':
        return Point3(-self.x, -self.y, -self.z)

    def norm(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def dist(self, p2: 'Point3') -> float:
        return self.subtract(p2).norm()

    def dot(self, q: 'Point3') -> float:
        return self.x * q.x + self.y * q.y + self.z * q.z

    def cross(self, q: 'Point3') -> 'Point3':
        return Point3(
            self.y * q.z - self.z * q.y,
            self.z * q.x - self.x * q.z,
            self.x * q.y - self.y * q.x
        )

    def __add__(self, q: 'Point3') -> 'Point3':
        return self.add(q)

    def __sub__(self, q: 'Point3') -> 'Point3':
        return self.subtract(q)

    def __mul__(self, s: float) -> 'Point3':
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> 'Point3':
        return self.divide(s)

    def __neg__(self) -> 'Point3':
        return self.negate()

    def __str__(self) -> str:
        return format_coordinates((self.x, self.y, self.z))


_DIM = Point3.dimension


def compose(p1: Point3, p2: Point3) -> Point3:
    return p1.compose(p2)


def compose_with_jacobians(p1: Point3, p2: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return linearize(p1.compose(p2), _DIM, (1.0, 1.0), H1, H2)


def dcompose1(p1: Point3, p2: Point3) -> np.ndarray:
    """d(p1 + p2)/dp1 for any operands."""
    return linear_jacobian(1.0, _DIM)


def dcompose2(p1: Point3, p2: Point3) -> np.ndarray:
    """d(p1 + p2)/dp2 for any operands."""
    return linear_jacobian(1.0, _DIM)


def between(p1: Point3, p2: Point3) -> Point3:
    return p1.between(p2)


def between_with_jacobians(p1: Point3, p2: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return linearize(p1.between(p2), _DIM, (-1.0, 1.0), H1, H2)


def add(p: Point3, q: Point3) -> Point3:
    """add(p, q) is the same as p + q."""
    return p.add(q)


def add_with_jacobians(p: Point3, q: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return linearize(p.add(q), _DIM, (1.0, 1.0), H1, H2)


def dadd1(p: Point3, q: Point3) -> np.ndarray:
    return linear_jacobian(1.0, _DIM)


def dadd2(p: Point3, q: Point3) -> np.ndarray:
    return linear_jacobian(1.0, _DIM)


def sub(p: Point3, q: Point3) -> Point3:
    """sub(p, q) is the same as p - q."""
    return p.subtract(q)


def sub_with_jacobians(p: Point3, q: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return linearize(p.subtract(q), _DIM, (1.0, -1.0), H1, H2)


def dsub1(p: Point3, q: Point3) -> np.ndarray:
    return linear_jacobian(1.0, _DIM)


def dsub2(p: Point3, q: Point3) -> np.ndarray:
    return linear_jacobian(-1.0, _DIM)


def cross(p: Point3, q: Point3) -> Point3:
    """Cross product p x q."""
    return p.cross(q)


def dcross1(p: Point3, q: Point3) -> np.ndarray:
    """d(p x q)/dp = -[q]x."""
    return -skew_symmetric(q.vector())


def dcross2(p: Point3, q: Point3) -> np.ndarray:
    """d(p x q)/dq = [p]x."""
    return skew_symmetric(p.vector())


def cross_with_jacobians(p: Point3, q: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return Linearization(
        p.cross(q),
        dcross1(p, q) if H1 else None,
        dcross2(p, q) if H2 else None,
    )


def dot(p: Point3, q: Point3) -> float:
    """Inner product p . q."""
    return p.dot(q)


def ddot1(p: Point3, q: Point3) -> np.ndarray:
    """d(p . q)/dp = q^T as a 1x3 row."""
    return q.vector().reshape(1, _DIM)


def ddot2(p: Point3, q: Point3) -> np.ndarray:
    """d(p . q)/dq = p^T as a 1x3 row."""
    return p.vector().reshape(1, _DIM)


def dot_with_jacobians(p: Point3, q: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return Linearization(
        p.dot(q),
        ddot1(p, q) if H1 else None,
        ddot2(p, q) if H2 else None,
    )


def norm(p: Point3) -> float:
    return p.norm()


def dnorm(p: Point3) -> np.ndarray:
    """
    Gradient of the norm, p^T / |p| as a 1x3 row.

    Zeros at the origin, where the norm has no derivative.
    """
    n = p.norm()
    if n == 0.0:
        return np.zeros((1, _DIM))
    return (p.vector() / n).reshape(1, _DIM)


def norm_with_jacobian(p: Point3, H: bool = True) -> Linearization:
    return Linearization(p.norm(), dnorm(p) if H else None)


def dist(p1: Point3, p2: Point3) -> float:
    """dist(p1, p2) = norm(p1 - p2)."""
    return p1.dist(p2)


def ddist1(p1: Point3, p2: Point3) -> np.ndarray:
    return dnorm(p1.subtract(p2))


def ddist2(p1: Point3, p2: Point3) -> np.ndarray:
    return -dnorm(p1.subtract(p2))


def dist_with_jacobians(p1: Point3, p2: Point3, H1: bool = True, H2: bool = True) -> Linearization:
    return Linearization(
        p1.dist(p2),
        ddist1(p1, p2) if H1 else None,
        ddist2(p1, p2) if H2 else None,
    )
