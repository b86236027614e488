"""
Buildable-area mask over map space.

The mask is derived from a height-threshold image: cells below the threshold
(or transparent pixels of an RGBA image) are unbuildable. Map coordinates are
scaled linearly onto the mask grid, so the mask may have any resolution.
"""

import math

from typing import Tuple

import numpy as np

from ..errors import MaskLookupOutOfBounds


class SpatialMask:
    """Answers whether a map coordinate is buildable."""

    def __init__(self, buildable: np.ndarray, map_width: float, map_height: float):
        """
        Args:
            buildable: 2D boolean array indexed [row=y, col=x]
            map_width: Width of the map space the mask covers
            map_height: Height of the map space the mask covers
        """
        buildable = np.asarray(buildable, dtype=bool)
        if buildable.ndim != 2:
            raise ValueError(f"Mask must be 2D, got shape {buildable.shape}")
        if buildable.size == 0:
            raise ValueError("Mask must contain at least one cell")
        if map_width <= 0 or map_height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {map_width}x{map_height}")

        self.buildable = buildable
        self.map_width = float(map_width)
        self.map_height = float(map_height)

    @classmethod
    def from_heights(
        cls, heights: np.ndarray, threshold: float, map_width: float, map_height: float
    ) -> "SpatialMask":
        """Buildable wherever the height field reaches the threshold."""
        heights = np.asarray(heights)
        return cls(heights >= threshold, map_width, map_height)

    @classmethod
    def from_rgba(cls, image: np.ndarray, map_width: float, map_height: float) -> "SpatialMask":
        """Buildable wherever the pixel is not fully transparent."""
        image = np.asarray(image)
        if image.ndim != 3 or image.shape[2] != 4:
            raise ValueError(f"Expected an RGBA image of shape (h, w, 4), got {image.shape}")
        return cls(image[:, :, 3] > 0, map_width, map_height)

    @classmethod
    def open(cls, map_width: float, map_height: float, resolution: int = 1) -> "SpatialMask":
        """Fully buildable mask with `resolution` cells per map unit."""
        rows = max(1, int(np.ceil(map_height * resolution)))
        cols = max(1, int(np.ceil(map_width * resolution)))
        return cls(np.ones((rows, cols), dtype=bool), map_width, map_height)

    @property
    def width(self) -> int:
        return self.buildable.shape[1]

    @property
    def height(self) -> int:
        return self.buildable.shape[0]

    @property
    def buildable_fraction(self) -> float:
        """Share of mask cells that are buildable."""
        return float(self.buildable.mean())

    def covers(self, map_width: float, map_height: float) -> bool:
        """True when this mask spans a map of the given size."""
        return math.isclose(self.map_width, map_width) and math.isclose(
            self.map_height, map_height
        )

    def to_mask_coords(self, position: Tuple[float, float]) -> Tuple[int, int]:
        """Scale a map coordinate to (col, row) on the mask grid (lossy)."""
        x, y = position
        col = math.floor(x / self.map_width * self.width)
        row = math.floor(y / self.map_height * self.height)
        return col, row

    def is_buildable(self, position: Tuple[float, float]) -> bool:
        col, row = self.to_mask_coords(position)
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise MaskLookupOutOfBounds(
                f"Map position {position} maps to mask cell ({col}, {row}) "
                f"outside {self.width}x{self.height}"
            )
        return bool(self.buildable[row, col])

    def __repr__(self) -> str:
        return (
            f"SpatialMask({self.width}x{self.height} over "
            f"{self.map_width}x{self.map_height}, {self.buildable_fraction:.0%} buildable)"
        )
