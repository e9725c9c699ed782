"""
Runtime configuration for pointgeom.

Settings are read from YAML. The packaged ``config/default.yaml`` is loaded
lazily the first time ``get_config`` is called.
"""
import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    'config', 'default.yaml'
)


@dataclass
class GeometryConfig:
    """Package-wide numeric settings."""
    equals_tolerance: float = 1e-9  # default tol for equals()
    numerical_delta: float = 1e-5  # finite-difference step
    print_precision: Optional[int] = None  # None prints repr of each float
    log_level: str = 'WARNING'

    def __post_init__(self):
        try:
            self.equals_tolerance = float(self.equals_tolerance)
            self.numerical_delta = float(self.numerical_delta)
            if self.print_precision is not None:
                self.print_precision = int(self.print_precision)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        # NaN fails both comparisons
        if not self.equals_tolerance >= 0:
            raise ConfigError(f"equals_tolerance must be >= 0, got {self.equals_tolerance}")
        if not self.numerical_delta > 0:
            raise ConfigError(f"numerical_delta must be > 0, got {self.numerical_delta}")
        if self.print_precision is not None and self.print_precision < 0:
            raise ConfigError(f"print_precision must be >= 0, got {self.print_precision}")

        if not isinstance(self.log_level, str) or \
                not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, data: dict) -> 'GeometryConfig':
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)


_active: Optional[GeometryConfig] = None


def load_config(path: Optional[str] = None) -> GeometryConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file; the packaged defaults are used when omitted

    Returns:
        Parsed configuration
    """
    path = path or DEFAULT_CONFIG_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read configuration {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a mapping")

    logger.debug("Loaded configuration from %s", path)
    return GeometryConfig.from_dict(data)


def get_config() -> GeometryConfig:
    """Return the active configuration, loading defaults on first use."""
    global _active
    if _active is None:
        _active = load_config()
    return _active


def set_config(config: Optional[GeometryConfig]):
    """Replace the active configuration; ``None`` restores the defaults."""
    global _active
    _active = config
