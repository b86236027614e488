"""Generation parameters for a node map run."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import ConfigurationError


class GenerationConfig(BaseModel):
    """
    Immutable parameter bundle consumed by the generation pipeline.

    Every structural value is caller-supplied. Invalid combinations raise
    ConfigurationError at construction, before any placement work starts.
    """

    model_config = ConfigDict(frozen=True)

    nodes_to_generate: int = Field(description="Target number of nodes to place")
    max_generation_cycles: int = Field(
        description="Placement attempt budget, accepted and rejected attempts alike"
    )
    map_width: float = Field(description="Map width in map units")
    map_height: float = Field(description="Map height in map units")
    min_node_distance: float = Field(description="Minimum distance between placed nodes")
    max_connection_distance: float = Field(
        description="Upper bound of the per-node connection range"
    )
    min_node_connections: int = Field(
        description="Degree every node should reach before connecting stops"
    )
    max_node_connections: int = Field(description="Upper bound of per-node capacity")
    connection_attempt_timeout: int = Field(
        description="Consecutive failed connection attempts before giving up"
    )
    town_probability: float = Field(
        default=0.25, description="Probability that a placed node is a town"
    )

    @model_validator(mode="after")
    def _check_workable(self) -> "GenerationConfig":
        # ConfigurationError is not a ValueError, so pydantic lets it through unwrapped
        if self.map_width <= 0 or self.map_height <= 0:
            raise ConfigurationError(
                f"Map dimensions must be positive, got {self.map_width}x{self.map_height}"
            )
        if self.nodes_to_generate < 0:
            raise ConfigurationError("nodes_to_generate must not be negative")
        if self.max_generation_cycles < 1:
            raise ConfigurationError("max_generation_cycles must be at least 1")
        if self.min_node_distance < 0 or self.max_connection_distance < 0:
            raise ConfigurationError("Distances must not be negative")
        if self.min_node_distance > self.max_connection_distance:
            raise ConfigurationError(
                f"min_node_distance ({self.min_node_distance}) exceeds "
                f"max_connection_distance ({self.max_connection_distance}); "
                "no node could ever reach a neighbour"
            )
        if self.min_node_connections < 0:
            raise ConfigurationError("min_node_connections must not be negative")
        if self.min_node_connections > self.max_node_connections:
            raise ConfigurationError(
                f"min_node_connections ({self.min_node_connections}) exceeds "
                f"max_node_connections ({self.max_node_connections})"
            )
        if self.connection_attempt_timeout < 1:
            raise ConfigurationError("connection_attempt_timeout must be at least 1")
        if not 0.0 <= self.town_probability <= 1.0:
            raise ConfigurationError(
                f"town_probability must be within [0, 1], got {self.town_probability}"
            )
        return self
