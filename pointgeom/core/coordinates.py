"""
Coordinate helpers shared by the flat point types.
"""
import logging
from typing import Optional, Sequence

import numpy as np

from .config import get_config
from .errors import InvalidDimension

logger = logging.getLogger(__name__)


def as_coordinates(v, dimension: int, type_name: str) -> np.ndarray:
    """
    Convert ``v`` into a float64 coordinate vector of length ``dimension``.

    Column vectors of shape (dimension, 1) are flattened.

    Raises:
        InvalidDimension: if ``v`` does not hold exactly ``dimension`` values
    """
    arr = np.asarray(v, dtype=np.float64).reshape(-1)
    if arr.shape[0] != dimension:
        logger.debug("Rejected %d-vector for %s", arr.shape[0], type_name)
        raise InvalidDimension(type_name, dimension, arr.shape[0])
    return arr


def within_tolerance(a: Sequence[float], b: Sequence[float], tol: Optional[float]) -> bool:
    """
    Component-wise equality: every |a_i - b_i| <= tol.

    ``tol=None`` uses the configured ``equals_tolerance``. With ``tol=0`` this
    is exact equality. Equal infinities match; NaN components never compare
    equal.
    """
    if tol is None:
        tol = get_config().equals_tolerance
    return all(ai == bi or abs(ai - bi) <= tol for ai, bi in zip(a, b))


def divide_coordinates(values: Sequence[float], s: float) -> np.ndarray:
    """Divide coordinates by ``s`` with IEEE semantics (inf/nan on zero)."""
    with np.errstate(divide='ignore', invalid='ignore'):
        result = np.asarray(values, dtype=np.float64) / np.float64(s)
    if s == 0:
        logger.debug("Division by zero produced %s", result)
    return result


def format_coordinates(values: Sequence[float], precision: Optional[int] = None) -> str:
    """Format coordinates as ``(a, b, ...)`` honoring ``print_precision``."""
    if precision is None:
        precision = get_config().print_precision
    if precision is None:
        parts = [repr(float(c)) for c in values]
    else:
        parts = [f"{float(c):.{precision}f}" for c in values]
    return "(" + ", ".join(parts) + ")"
