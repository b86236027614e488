"""
Configuration modules for node map generation.
"""

from .generation import GenerationConfig
from .config import Settings
from .log_setup import configure_logging

__all__ = ["GenerationConfig", "Settings", "configure_logging"]
