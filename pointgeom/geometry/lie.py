"""
Lie group operations written against the LieElement contract.

These functions work for any type that provides compose/inverse/expmap/
logmap/dim, so optimization code never needs to know the concrete type.
"""
from typing import Type, TypeVar

import numpy as np

from ..core.jacobians import Linearization, linearize

G = TypeVar('G')


def identity(cls: Type[G]) -> G:
    """Identity element of a group type: expmap of the zero vector."""
    return cls.expmap(np.zeros(cls.dimension))


def compose(p1: G, p2: G) -> G:
    return p1.compose(p2)


def inverse(p: G) -> G:
    return p.inverse()


def between(p1: G, p2: G) -> G:
    """``p2`` expressed relative to ``p1``: compose(inverse(p1), p2)."""
    return p1.inverse().compose(p2)


def retract(p: G, v) -> G:
    """Move ``p`` by the tangent vector ``v``: compose(p, Expmap(v))."""
    return p.compose(type(p).expmap(v))


def local(p: G, q: G) -> np.ndarray:
    """Tangent vector taking ``p`` to ``q``: Logmap(between(p, q))."""
    return type(p).logmap(between(p, q))


def compose_with_jacobians(p1: G, p2: G, H1: bool = True, H2: bool = True) -> Linearization:
    """
    compose(p1, p2) plus the requested Jacobians.

    Composition of the flat point types is p1 + p2, so both Jacobians are
    the identity of the tangent dimension.
    """
    return linearize(p1.compose(p2), p1.dim(), (1.0, 1.0), H1, H2)


def between_with_jacobians(p1: G, p2: G, H1: bool = True, H2: bool = True) -> Linearization:
    """between(p1, p2) = p2 - p1, with Jacobians -I and I."""
    return linearize(between(p1, p2), p1.dim(), (-1.0, 1.0), H1, H2)


def inverse_with_jacobian(p: G, H: bool = True) -> Linearization:
    """inverse(p) = -p, with Jacobian -I."""
    return linearize(p.inverse(), p.dim(), (-1.0, 0.0), H, False)
