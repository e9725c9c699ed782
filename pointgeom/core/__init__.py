"""
Core components shared by the pointgeom point types.
"""
from .errors import (
    GeometryError,
    InvalidDimension,
    ArchiveError,
    ConfigError,
    EqualityAssertionError
)

from .config import (
    GeometryConfig,
    load_config,
    get_config,
    set_config
)

from .concepts import (
    Testable,
    LieElement,
    assert_equal,
    assert_not_equal
)

from .jacobians import (
    Linearization,
    linear_jacobian,
    linearize,
    skew_symmetric
)

from .numerical import (
    numerical_derivative11,
    numerical_derivative21,
    numerical_derivative22
)

__all__ = [
    # Errors
    'GeometryError',
    'InvalidDimension',
    'ArchiveError',
    'ConfigError',
    'EqualityAssertionError',
    # Config
    'GeometryConfig',
    'load_config',
    'get_config',
    'set_config',
    # Contracts
    'Testable',
    'LieElement',
    'assert_equal',
    'assert_not_equal',
    # Jacobians
    'Linearization',
    'linear_jacobian',
    'linearize',
    'skew_symmetric',
    # Numerical derivatives
    'numerical_derivative11',
    'numerical_derivative21',
    'numerical_derivative22',
]
