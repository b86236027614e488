"""
Greedy nearest-neighbour connection of placed nodes.

Nodes are visited once, in placement order. Each node is offered its nearest
unconnected neighbours, up to its remaining capacity, and connects to those
within reach. A connection succeeds when either endpoint's range covers the
distance and the candidate still has capacity. Consecutive failures are
counted globally; reaching connection_attempt_timeout ends the pass.

Candidate ranking is a true bounded top-K: the K closest unconnected nodes,
ties resolved in favour of the node seen first in placement order. A
single running minimum would yield at most one useful candidate per node.
"""

import heapq
import time

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np
import structlog

from ..config.generation import GenerationConfig
from .nodes import Node

logger = structlog.get_logger()


class ConnectionOutcome(str, Enum):
    """Why a connection pass stopped."""

    DEGREE_SATISFIED = "degree_satisfied"
    NODES_EXHAUSTED = "nodes_exhausted"
    TIMED_OUT = "timed_out"


@dataclass
class ConnectionReport:
    """Outcome of a connection pass."""

    outcome: ConnectionOutcome
    total_nodes: int
    connections_made: int = 0
    nodes_connected: int = 0
    failed_attempts: int = 0

    @property
    def degraded(self) -> bool:
        return self.outcome is not ConnectionOutcome.DEGREE_SATISFIED


def rank_candidates(node: Node, nodes: Sequence[Node], positions: np.ndarray, k: int) -> List[Node]:
    """
    Return the k nearest nodes not yet connected to `node`, closest first.

    Args:
        node: Node whose neighbours are ranked
        nodes: All nodes, in placement order
        positions: (n, 2) array of node positions aligned with `nodes`
        k: Maximum number of candidates

    Equal distances keep placement order.
    """
    if k <= 0:
        return []

    distances = np.hypot(
        positions[:, 0] - node.position[0], positions[:, 1] - node.position[1]
    )
    eligible = (
        (float(distances[i]), i)
        for i, other in enumerate(nodes)
        if other is not node and not node.is_connected(other)
    )
    return [nodes[i] for _, i in heapq.nsmallest(k, eligible)]


class GraphConnector:
    """Connects nodes under degree bounds, connection ranges and a failure budget."""

    def __init__(self):
        self.report: Optional[ConnectionReport] = None

    @staticmethod
    def _degree_satisfied(nodes: Sequence[Node], min_degree: int) -> bool:
        return all(n.connection_count >= min_degree for n in nodes)

    def connect(self, nodes: Sequence[Node], config: GenerationConfig) -> ConnectionReport:
        """
        Connect nodes in place.

        Args:
            nodes: Placed nodes, processed in the given order
            config: Generation parameters (degree floor and failure budget)

        Returns:
            ConnectionReport describing how the pass ended. A partially
            connected graph is a valid result.
        """
        logger.info("Connecting nodes", nodes=len(nodes))
        start = time.perf_counter()

        min_degree = config.min_node_connections
        timeout = config.connection_attempt_timeout
        report = ConnectionReport(outcome=ConnectionOutcome.NODES_EXHAUSTED, total_nodes=len(nodes))
        positions = np.array([n.position for n in nodes], dtype=float).reshape(-1, 2)
        failures = 0

        for node in nodes:
            if self._degree_satisfied(nodes, min_degree):
                report.outcome = ConnectionOutcome.DEGREE_SATISFIED
                break
            if failures >= timeout:
                report.outcome = ConnectionOutcome.TIMED_OUT
                break
            if node.is_full:
                continue

            failures = 0
            degree_before = node.connection_count

            for candidate in rank_candidates(node, nodes, positions, node.remaining_capacity):
                if failures >= timeout:
                    break
                if node.is_full:
                    break

                distance = node.distance_to(candidate)
                if distance > node.connection_range and distance > candidate.connection_range:
                    failures += 1
                    report.failed_attempts += 1
                    continue
                if candidate.is_full:
                    failures += 1
                    report.failed_attempts += 1
                    continue

                node.connect(candidate)
                report.connections_made += 1
                failures = 0

            if node.connection_count > degree_before:
                report.nodes_connected += 1
        else:
            # Ran off the end: the final node may have completed the graph
            if self._degree_satisfied(nodes, min_degree):
                report.outcome = ConnectionOutcome.DEGREE_SATISFIED
            elif failures >= timeout:
                report.outcome = ConnectionOutcome.TIMED_OUT

        elapsed_ms = (time.perf_counter() - start) * 1000
        self.report = report

        if report.outcome is ConnectionOutcome.TIMED_OUT:
            logger.warning(
                "Connection attempts timed out",
                nodes_connected=report.nodes_connected,
                connections=report.connections_made,
                failed_attempts=report.failed_attempts,
            )
        elif report.outcome is ConnectionOutcome.NODES_EXHAUSTED:
            logger.warning(
                "Ran out of nodes before every node reached its minimum degree",
                nodes_connected=report.nodes_connected,
                connections=report.connections_made,
            )
        else:
            logger.info(
                "Connected nodes",
                connections=report.connections_made,
                elapsed_ms=round(elapsed_ms, 2),
            )

        return report
