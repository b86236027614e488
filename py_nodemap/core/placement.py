"""
Node placement.

Candidate positions are sampled uniformly over the map and rejected when the
spatial mask marks them unbuildable or when they fall too close to an
already-placed node. Every attempt, accepted or not, spends one cycle of the
generation budget.
"""

import time

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import structlog

from sklearn.neighbors import KDTree

from ..config.generation import GenerationConfig
from ..errors import ConfigurationError
from .alea_prng import RandomSource
from .nodes import Node, NodeFactory
from .spatial_mask import SpatialMask

logger = structlog.get_logger()


@dataclass
class PlacementReport:
    """Outcome of a placement run."""

    requested: int
    generated: int = 0
    cycles: int = 0
    mask_rejections: int = 0
    distance_rejections: int = 0

    @property
    def degraded(self) -> bool:
        """True when the cycle budget ran out before the target was met."""
        return self.generated < self.requested


class NodePlacer:
    """Places nodes under the mask and minimum-separation constraints."""

    def __init__(self, rng: RandomSource, factory: Optional[NodeFactory] = None):
        self.rng = rng
        self.factory = factory
        self.report: Optional[PlacementReport] = None

    def place(self, config: GenerationConfig, mask: SpatialMask) -> List[Node]:
        """
        Place up to config.nodes_to_generate nodes.

        Args:
            config: Generation parameters
            mask: Buildable-area mask covering the map

        Returns:
            Placed nodes in acceptance order. Fewer than requested when the
            cycle budget runs out; see self.report for the counts.

        Raises:
            ConfigurationError: If the mask was built for a different map size
        """
        if not mask.covers(config.map_width, config.map_height):
            raise ConfigurationError(
                f"Mask covers a {mask.map_width}x{mask.map_height} map but the "
                f"config describes {config.map_width}x{config.map_height}"
            )

        logger.info("Placing nodes", requested=config.nodes_to_generate)
        start = time.perf_counter()

        factory = self.factory or NodeFactory.from_config(config, self.rng)
        report = PlacementReport(requested=config.nodes_to_generate)
        nodes: List[Node] = []
        tree: Optional[KDTree] = None

        while report.generated < config.nodes_to_generate and report.cycles < config.max_generation_cycles:
            report.cycles += 1

            variant = factory.pick_variant()
            position = (
                self.rng.uniform(0, config.map_width),
                self.rng.uniform(0, config.map_height),
            )

            if not mask.is_buildable(position):
                report.mask_rejections += 1
                continue

            # The first node has nothing to keep away from
            if tree is not None:
                distances, _ = tree.query([position], k=1)
                if distances[0][0] < config.min_node_distance:
                    report.distance_rejections += 1
                    continue

            nodes.append(factory.create(variant, position))
            report.generated += 1
            tree = KDTree(np.array([n.position for n in nodes]))

        elapsed_ms = (time.perf_counter() - start) * 1000
        self.report = report

        if report.degraded:
            logger.warning(
                "Failed to place nodes within the cycle budget",
                generated=report.generated,
                requested=report.requested,
                cycles=report.cycles,
                mask_rejections=report.mask_rejections,
                distance_rejections=report.distance_rejections,
            )
        else:
            logger.info(
                "Placed nodes",
                generated=report.generated,
                cycles=report.cycles,
                elapsed_ms=round(elapsed_ms, 2),
            )

        return nodes
