"""
Flat point types and their group operations.
"""
from .point2 import Point2
from .point3 import Point3
from .stereo_point2 import StereoPoint2
from .lie import (
    identity,
    compose,
    inverse,
    between,
    retract,
    local,
    compose_with_jacobians,
    between_with_jacobians,
    inverse_with_jacobian
)

__all__ = [
    # Types
    'Point2',
    'Point3',
    'StereoPoint2',
    # Lie group
    'identity',
    'compose',
    'inverse',
    'between',
    'retract',
    'local',
    'compose_with_jacobians',
    'between_with_jacobians',
    'inverse_with_jacobian',
]
