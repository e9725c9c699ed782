"""
Finite-difference Jacobians in tangent-space coordinates.

Used to check analytic derivatives: an input x is perturbed as
compose(x, Expmap(d)) and outputs are compared through Logmap(between(y0, y)).
Scalar outputs are compared by plain subtraction.
"""
from typing import Callable, Optional

import numpy as np
from scipy.optimize import approx_fprime

from .config import get_config


def _retract(x, d):
    return x.compose(type(x).expmap(d))


def _local(y0, y) -> np.ndarray:
    if np.isscalar(y0):
        return np.atleast_1d(float(y) - float(y0))
    return type(y0).logmap(y0.inverse().compose(y))


def _jacobian(g: Callable, y0, dim: int, delta: Optional[float]) -> np.ndarray:
    if delta is None:
        delta = get_config().numerical_delta
    H = approx_fprime(np.zeros(dim), lambda d: _local(y0, g(d)), delta)
    return np.asarray(H, dtype=np.float64).reshape(-1, dim)


def numerical_derivative11(h: Callable, x, delta: Optional[float] = None) -> np.ndarray:
    """
    Jacobian of the unary function h at x.

    Args:
        h: Function of one group element returning a group element or scalar
        x: Linearization point
        delta: Finite-difference step; defaults to ``numerical_delta``

    Returns:
        (m, dim(x)) matrix; m is 1 for scalar-valued h
    """
    return _jacobian(lambda d: h(_retract(x, d)), h(x), x.dim(), delta)


def numerical_derivative21(h: Callable, x1, x2, delta: Optional[float] = None) -> np.ndarray:
    """Jacobian of the binary function h with respect to its first argument."""
    return _jacobian(lambda d: h(_retract(x1, d), x2), h(x1, x2), x1.dim(), delta)


def numerical_derivative22(h: Callable, x1, x2, delta: Optional[float] = None) -> np.ndarray:
    """Jacobian of the binary function h with respect to its second argument."""
    return _jacobian(lambda d: h(x1, _retract(x2, d)), h(x1, x2), x2.dim(), delta)
