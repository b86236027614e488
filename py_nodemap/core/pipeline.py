"""
Node map generation pipeline.

Process:
1. NodePlacer.place() - Scatter nodes over the buildable area
2. GraphConnector.connect() - Link nodes to their nearest reachable neighbours
3. GraphCleaner.clean() - Drop nodes that stayed isolated

Stages never abort the run: a short placement or an incomplete connection
pass is carried forward and reported on the result.
"""

import time

from dataclasses import dataclass
from typing import Callable, List, Optional

import structlog

from ..config.generation import GenerationConfig
from .alea_prng import RandomSource, make_random_source
from .cleanup import CleanupReport, GraphCleaner
from .connection import ConnectionReport, GraphConnector
from .nodes import Node
from .placement import NodePlacer, PlacementReport
from .spatial_mask import SpatialMask

logger = structlog.get_logger()


@dataclass
class GenerationResult:
    """Final nodes together with the per-stage reports."""

    nodes: List[Node]
    placement: PlacementReport
    connection: ConnectionReport
    cleanup: CleanupReport
    elapsed_ms: float = 0.0

    @property
    def degraded(self) -> bool:
        return self.placement.degraded or self.connection.degraded

    def summary(self) -> dict:
        return {
            "requested": self.placement.requested,
            "generated": self.placement.generated,
            "cycles": self.placement.cycles,
            "connection_outcome": self.connection.outcome.value,
            "connections": self.connection.connections_made,
            "discarded": self.cleanup.discarded,
            "final_nodes": len(self.nodes),
            "degraded": self.degraded,
        }


CompletionListener = Callable[[GenerationResult], None]


class GenerationPipeline:
    """Runs placement, connection and cleanup in sequence."""

    def __init__(self, rng: Optional[RandomSource] = None, seed=None):
        """
        Args:
            rng: Random source shared by all stages
            seed: Seed for a default AleaPRNG when rng is not given
        """
        self.rng = rng if rng is not None else make_random_source(seed)
        self._listeners: List[CompletionListener] = []

    def add_listener(self, listener: CompletionListener) -> None:
        """Register a callback invoked with the result when generation finishes."""
        self._listeners.append(listener)

    def remove_listener(self, listener: CompletionListener) -> None:
        self._listeners.remove(listener)

    def generate(self, config: GenerationConfig, mask: SpatialMask) -> GenerationResult:
        logger.info(
            "Starting node map generation",
            nodes_to_generate=config.nodes_to_generate,
            map_size=f"{config.map_width}x{config.map_height}",
        )
        start = time.perf_counter()

        placer = NodePlacer(self.rng)
        nodes = placer.place(config, mask)

        connector = GraphConnector()
        connection_report = connector.connect(nodes, config)

        cleaner = GraphCleaner()
        final_nodes = cleaner.clean(nodes)

        result = GenerationResult(
            nodes=final_nodes,
            placement=placer.report,
            connection=connection_report,
            cleanup=cleaner.report,
            elapsed_ms=(time.perf_counter() - start) * 1000,
        )

        log = logger.warning if result.degraded else logger.info
        log("Node map generation finished", **result.summary())

        for listener in list(self._listeners):
            listener(result)

        return result


def generate_node_map(config: GenerationConfig, mask: SpatialMask, seed=None) -> List[Node]:
    """
    Generate a connected node map and return its nodes.

    Args:
        config: Generation parameters
        mask: Buildable-area mask covering the map
        seed: Optional seed for reproducible output

    Returns:
        Nodes that hold at least one connection
    """
    return GenerationPipeline(seed=seed).generate(config, mask).nodes
