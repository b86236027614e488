"""
Error types raised by node map generation.

Degraded generation (fewer nodes or connections than requested) is not an
error: it is reported through the stage reports and logged as a warning.
"""


class ConfigurationError(Exception):
    """Raised when a GenerationConfig cannot describe a workable generation run."""


class MaskLookupOutOfBounds(IndexError):
    """
    Raised when a map coordinate scales to a cell outside the spatial mask.

    Placement only samples inside the map bounds, so this indicates a bug in
    coordinate scaling rather than a recoverable condition.
    """
