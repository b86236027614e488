"""Shared fixtures for node map tests."""

import pytest

from py_nodemap.config import GenerationConfig
from py_nodemap.core import AleaPRNG, SpatialMask

BASE_CONFIG = dict(
    nodes_to_generate=20,
    max_generation_cycles=1000,
    map_width=50,
    map_height=50,
    min_node_distance=3.0,
    max_connection_distance=8.0,
    min_node_connections=1,
    max_node_connections=3,
    connection_attempt_timeout=20,
)


def make_config(**overrides) -> GenerationConfig:
    """Build a GenerationConfig from the shared base values."""
    values = dict(BASE_CONFIG)
    values.update(overrides)
    return GenerationConfig(**values)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def open_mask():
    return SpatialMask.open(50, 50)


@pytest.fixture
def rng():
    return AleaPRNG("node_map_test")
