"""Tests for generation parameters and environment settings."""

import pytest
import structlog
from pydantic import ValidationError

from py_nodemap.config import GenerationConfig, Settings, configure_logging
from py_nodemap.errors import ConfigurationError

from conftest import BASE_CONFIG, make_config


class TestGenerationConfig:
    """Test GenerationConfig validation."""

    def test_valid_config(self):
        config = make_config()
        assert config.nodes_to_generate == 20
        assert config.map_width == 50.0
        assert config.town_probability == 0.25

    def test_frozen(self):
        config = make_config()
        with pytest.raises(ValidationError):
            config.nodes_to_generate = 5

    def test_fields_are_required(self):
        values = dict(BASE_CONFIG)
        del values["connection_attempt_timeout"]
        with pytest.raises(ValidationError):
            GenerationConfig(**values)

    @pytest.mark.parametrize("overrides", [
        {"map_width": 0},
        {"map_height": -10},
        {"nodes_to_generate": -1},
        {"max_generation_cycles": 0},
        {"min_node_distance": -1.0},
        {"min_node_distance": 10.0, "max_connection_distance": 5.0},
        {"min_node_connections": -1},
        {"min_node_connections": 4, "max_node_connections": 3},
        {"connection_attempt_timeout": 0},
        {"town_probability": 1.5},
    ])
    def test_invalid_configs_raise_configuration_error(self, overrides):
        with pytest.raises(ConfigurationError):
            make_config(**overrides)

    def test_zero_connection_distance_allowed(self):
        """A zero reach is legal as long as the minimum spacing is zero too."""
        config = make_config(min_node_distance=0.0, max_connection_distance=0.0)
        assert config.max_connection_distance == 0.0

    def test_equal_distances_allowed(self):
        config = make_config(min_node_distance=5.0, max_connection_distance=5.0)
        assert config.min_node_distance == config.max_connection_distance


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.seed is None

        config = settings.generation_config()
        assert config.nodes_to_generate == 50
        assert config.max_generation_cycles == 1000
        assert config.map_width == 100
        assert config.map_height == 100
        assert config.min_node_distance == 3.0
        assert config.max_connection_distance == 5.0
        assert config.min_node_connections == 1
        assert config.max_node_connections == 3
        assert config.connection_attempt_timeout == 20

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NODEMAP_NODES_TO_GENERATE", "12")
        monkeypatch.setenv("NODEMAP_SEED", "abc")
        settings = Settings()

        assert settings.seed == "abc"
        assert settings.generation_config().nodes_to_generate == 12

    def test_generation_config_overrides(self):
        config = Settings().generation_config(map_width=40, nodes_to_generate=7)
        assert config.map_width == 40
        assert config.nodes_to_generate == 7

    def test_invalid_environment_surfaces_configuration_error(self, monkeypatch):
        monkeypatch.setenv("NODEMAP_MIN_NODE_DISTANCE", "50")
        with pytest.raises(ConfigurationError):
            Settings().generation_config()


class TestConfigureLogging:
    """Test structlog configuration."""

    def teardown_method(self):
        structlog.reset_defaults()

    @pytest.mark.parametrize("fmt", ["json", "console"])
    def test_configures_stdlib_logger(self, fmt):
        configure_logging("DEBUG", fmt)

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)
        structlog.get_logger("py_nodemap.test").info("configured", fmt=fmt)
