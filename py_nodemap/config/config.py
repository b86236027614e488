"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .generation import GenerationConfig


class Settings(BaseSettings):
    """Application settings pulled from NODEMAP_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NODEMAP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    # Randomness
    seed: Optional[str] = Field(default=None, description="Seed for reproducible maps")

    # Mask
    mask_resolution: int = Field(
        default=8, description="Mask cells per map unit along each axis"
    )
    buildable_threshold: float = Field(
        default=20.0, description="Minimum height considered buildable"
    )

    # Generation defaults
    nodes_to_generate: int = Field(default=50, description="Target node count")
    max_generation_cycles: int = Field(default=1000, description="Placement attempt budget")
    map_width: float = Field(default=100, description="Map width")
    map_height: float = Field(default=100, description="Map height")
    min_node_distance: float = Field(default=3.0, description="Minimum node separation")
    max_connection_distance: float = Field(default=5.0, description="Maximum connection range")
    min_node_connections: int = Field(default=1, description="Minimum node degree")
    max_node_connections: int = Field(default=3, description="Maximum node degree")
    connection_attempt_timeout: int = Field(
        default=20, description="Consecutive failed connection attempts allowed"
    )
    town_probability: float = Field(default=0.25, description="Share of nodes that are towns")

    def generation_config(self, **overrides) -> GenerationConfig:
        """Build a GenerationConfig from these settings, with optional overrides."""
        values = {
            name: getattr(self, name)
            for name in GenerationConfig.model_fields
        }
        values.update(overrides)
        return GenerationConfig(**values)
