"""
pointgeom: flat manifold point types for nonlinear least-squares estimation.

Point2, Point3 and StereoPoint2 behave as optimization variables: each one is
an additive Lie group with identity Expmap/Logmap and analytic Jacobians.
"""

__version__ = "0.1.0"

from . import core
from . import geometry
from . import io
from . import utils
from .geometry import Point2, Point3, StereoPoint2

__all__ = ['core', 'geometry', 'io', 'utils', 'Point2', 'Point3', 'StereoPoint2']
