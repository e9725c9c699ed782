"""
Rectified stereo image point.
"""
from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from ..core.coordinates import as_coordinates, divide_coordinates, format_coordinates, within_tolerance
from ..core.jacobians import Linearization, linear_jacobian, linearize
from .point2 import Point2


@dataclass(frozen=True)
class StereoPoint2:
    """
    Stereo observation (uL, uR, v) from a rectified camera pair.

    uL and uR are the horizontal pixel coordinates in the left and right
    images; v is shared by both images after rectification.
    """
    uL: float = 0.0
    uR: float = 0.0
    v: float = 0.0

    dimension: ClassVar[int] = 3

    def __post_init__(self):
        object.__setattr__(self, 'uL', float(self.uL))
        object.__setattr__(self, 'uR', float(self.uR))
        object.__setattr__(self, 'v', float(self.v))

    @classmethod
    def from_vector(cls, d) -> 'StereoPoint2':
        uL, uR, v = as_coordinates(d, cls.dimension, cls.__name__)
        return cls(uL, uR, v)

    @classmethod
    def identity(cls) -> 'StereoPoint2':
        return cls()

    @classmethod
    def Dim(cls) -> int:
        return cls.dimension

    def dim(self) -> int:
        return self.dimension

    def vector(self) -> np.ndarray:
        """Coordinates [uL, uR, v]."""
        return np.array([self.uL, self.uR, self.v])

    def point2(self) -> Point2:
        """Left-image point (uL, v); the right coordinate is dropped."""
        return Point2(self.uL, self.v)

    @property
    def disparity(self) -> float:
        """Horizontal disparity uL - uR."""
        return self.uL - self.uR

    def print(self, s: str = ""):
        print(f"{s}{self}")

    def equals(self, q: 'StereoPoint2', tol: Optional[float] = None) -> bool:
        return within_tolerance((self.uL, self.uR, self.v), (q.uL, q.uR, q.v), tol)

    def equals_exact(self, q: 'StereoPoint2') -> bool:
        return self.uL == q.uL and self.uR == q.uR and self.v == q.v

    def compose(self, p: 'StereoPoint2') -> 'StereoPoint2':
        return self.add(p)

    def inverse(self) -> 'StereoPoint2':
        return StereoPoint2().subtract(self)

    def between(self, p: 'StereoPoint2') -> 'StereoPoint2':
        return p.subtract(self)

    @classmethod
    def expmap(cls, d) -> 'StereoPoint2':
        return cls.from_vector(d)

    @staticmethod
    def logmap(p: 'StereoPoint2') -> np.ndarray:
        return p.vector()

    def add(self, b: 'StereoPoint2') -> 'StereoPoint2':
        return StereoPoint2(self.uL + b.uL, self.uR + b.uR, self.v + b.v)

    def subtract(self, b: 'StereoPoint2') -> 'StereoPoint2':
        return StereoPoint2(self.uL - b.uL, self.uR - b.uR, self.v - b.v)

    def scale(self, s: float) -> 'StereoPoint2':
        return StereoPoint2(self.uL * s, self.uR * s, self.v * s)

    def divide(self, s: float) -> 'StereoPoint2':
        uL, uR, v = divide_coordinates((self.uL, self.uR, self.v), s)
        return StereoPoint2(uL, uR, v)

    def negate(self) -> 'StereoPoint2':
        return StereoPoint2(-self.uL, -self.uR, -self.v)

    def __add__(self, b: 'StereoPoint2') -> 'StereoPoint2':
        return self.add(b)

    def __sub__(self, b: 'StereoPoint2') -> 'StereoPoint2':
        return self.subtract(b)

    def __mul__(self, s: float) -> 'StereoPoint2':
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> 'StereoPoint2':
        return self.divide(s)

    def __neg__(self) -> 'StereoPoint2':
        return self.negate()

    def __str__(self) -> str:
        return format_coordinates((self.uL, self.uR, self.v))


def compose_with_jacobians(p1: StereoPoint2, p2: StereoPoint2, H1: bool = True, H2: bool = True) -> Linearization:
    return linearize(p1.compose(p2), StereoPoint2.dimension, (1.0, 1.0), H1, H2)


def between_with_jacobians(p1: StereoPoint2, p2: StereoPoint2, H1: bool = True, H2: bool = True) -> Linearization:
    return linearize(p1.between(p2), StereoPoint2.dimension, (-1.0, 1.0), H1, H2)


def dcompose1(p1: StereoPoint2, p2: StereoPoint2) -> np.ndarray:
    return linear_jacobian(1.0, StereoPoint2.dimension)


def dcompose2(p1: StereoPoint2, p2: StereoPoint2) -> np.ndarray:
    return linear_jacobian(1.0, StereoPoint2.dimension)
