"""
Jacobian containers and helpers.

Every group operation on the flat point types is an additive map of the form
``a * p + b * q``. Its Jacobian with respect to ``p`` is ``a * I`` and with
respect to ``q`` is ``b * I``, independent of the operand values.
"""
from typing import Any, NamedTuple, Optional

import numpy as np


class Linearization(NamedTuple):
    """Result of an operation together with the Jacobians the caller asked for."""
    value: Any
    H1: Optional[np.ndarray] = None
    H2: Optional[np.ndarray] = None


def linear_jacobian(coefficient: float, dimension: int) -> np.ndarray:
    """Jacobian of ``p -> coefficient * p`` on a ``dimension``-vector."""
    return coefficient * np.eye(dimension)


def linearize(value, dimension: int, coefficients, H1: bool = False, H2: bool = False) -> Linearization:
    """
    Package ``value`` with the Jacobians of an additive binary map.

    Args:
        value: Result of the operation
        dimension: Tangent dimension of the operands
        coefficients: (a, b) such that the result is ``a * p + b * q``
        H1: Build the Jacobian with respect to ``p``
        H2: Build the Jacobian with respect to ``q``
    """
    a, b = coefficients
    return Linearization(
        value,
        linear_jacobian(a, dimension) if H1 else None,
        linear_jacobian(b, dimension) if H2 else None,
    )


def skew_symmetric(v) -> np.ndarray:
    """
    Cross-product matrix of a 3-vector, so that skew_symmetric(v) @ w == v x w.
    """
    return np.array([
        [0.0, -v[2], v[1]],
        [v[2], 0.0, -v[0]],
        [-v[1], v[0], 0.0]
    ])
