"""
Unit tests for configuration and logging.
"""
import logging

import pytest
from pointgeom.core.config import GeometryConfig, load_config, get_config, set_config
from pointgeom.core.errors import ConfigError, InvalidDimension
from pointgeom.geometry import Point2, Point3
from pointgeom.utils.log import setup_logging


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


class TestConfig:
    """Tests for YAML configuration."""

    def test_defaults(self):
        config = get_config()
        assert config.equals_tolerance == 1e-9
        assert config.numerical_delta == 1e-5
        assert config.print_precision is None
        assert config.log_level == 'WARNING'

    def test_load_file(self, tmp_path):
        path = tmp_path / "geometry.yaml"
        path.write_text("equals_tolerance: 0.01\nprint_precision: 2\n")
        config = load_config(str(path))
        assert config.equals_tolerance == 0.01
        assert config.print_precision == 2
        assert config.numerical_delta == 1e-5

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == GeometryConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("tolerance: 0.1\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_negative_tolerance(self):
        with pytest.raises(ConfigError):
            GeometryConfig(equals_tolerance=-1.0)

    def test_non_numeric_tolerance(self):
        with pytest.raises(ConfigError):
            GeometryConfig.from_dict({'equals_tolerance': 'abc'})
        with pytest.raises(ConfigError):
            GeometryConfig(numerical_delta=None)

    def test_nan_tolerance(self):
        with pytest.raises(ConfigError):
            GeometryConfig(equals_tolerance=float('nan'))
        with pytest.raises(ConfigError):
            GeometryConfig(numerical_delta=float('nan'))

    def test_numeric_strings_coerced(self, tmp_path):
        path = tmp_path / "strings.yaml"
        path.write_text("equals_tolerance: '1e-3'\nlog_level: debug\n")
        config = load_config(str(path))
        assert config.equals_tolerance == 1e-3
        assert config.log_level == 'DEBUG'

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "level.yaml"
        path.write_text("log_level: NOPE\n")
        with pytest.raises(ConfigError):
            load_config(str(path))
        with pytest.raises(ConfigError):
            GeometryConfig(log_level=10)

    def test_tolerance_drives_equals(self):
        p, q = Point2(1, 2), Point2(1.005, 2)
        assert not p.equals(q)
        set_config(GeometryConfig(equals_tolerance=0.01))
        assert p.equals(q)

    def test_print_precision(self, capsys):
        set_config(GeometryConfig(print_precision=2))
        Point3(1, 2.346, 3).print("p: ")
        assert capsys.readouterr().out == "p: (1.00, 2.35, 3.00)\n"


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_level(self):
        logger = setup_logging('DEBUG')
        assert logger.name == 'pointgeom'
        assert logger.level == logging.DEBUG
        logger = setup_logging()
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_setup_logging_unknown_level(self):
        with pytest.raises(ConfigError):
            setup_logging('NOPE')

    def test_dimension_error_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='pointgeom')
        with pytest.raises(InvalidDimension):
            Point2.from_vector([1.0, 2.0, 3.0])
        assert "Rejected 3-vector for Point2" in caplog.text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
