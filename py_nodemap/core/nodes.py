"""
Node data structures and the factory that creates them.

A node is a placed settlement. Towns and villages differ only in their tag
and display colour; placement and connection treat them identically.
"""

import math

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .alea_prng import RandomSource


class NodeVariant(str, Enum):
    """Settlement kind carried by a node for classification and rendering."""

    TOWN = "town"
    VILLAGE = "village"

    @property
    def color(self) -> str:
        return _VARIANT_COLORS[self]


_VARIANT_COLORS = {
    NodeVariant.TOWN: "#ffd700",
    NodeVariant.VILLAGE: "#ffffff",
}


@dataclass(eq=False)
class Node:
    """A settlement point with a degree capacity and a connection range."""

    id: int
    position: Tuple[float, float]
    variant: NodeVariant
    max_connections: int
    connection_range: float
    connections: List["Node"] = field(default_factory=list, repr=False)

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def connection_count(self) -> int:
        return len(self.connections)

    @property
    def remaining_capacity(self) -> int:
        return max(0, self.max_connections - len(self.connections))

    @property
    def is_full(self) -> bool:
        return len(self.connections) >= self.max_connections

    def distance_to(self, other: "Node") -> float:
        return math.dist(self.position, other.position)

    def is_connected(self, other: "Node") -> bool:
        return any(n is other for n in self.connections)

    def connect(self, other: "Node") -> None:
        """
        Record a connection on both endpoints.

        Raises:
            ValueError: On self-connection, duplicate connection, or when
                either endpoint is already at capacity
        """
        if other is self:
            raise ValueError(f"Node {self.id} cannot connect to itself")
        if self.is_connected(other):
            raise ValueError(f"Nodes {self.id} and {other.id} are already connected")
        if self.is_full or other.is_full:
            raise ValueError(
                f"Cannot connect nodes {self.id} and {other.id}: capacity reached"
            )
        self.connections.append(other)
        other.connections.append(self)

    def __repr__(self) -> str:
        return (
            f"Node(id={self.id}, variant={self.variant.value}, "
            f"position=({self.x:.2f}, {self.y:.2f}), "
            f"connections={[n.id for n in self.connections]}/{self.max_connections})"
        )


class NodeFactory:
    """Creates nodes with capacity and range drawn from the configured bounds."""

    def __init__(
        self,
        rng: RandomSource,
        min_connections: int,
        max_connections: int,
        min_range: float,
        max_range: float,
        town_probability: float = 0.25,
    ):
        self.rng = rng
        self.min_connections = min_connections
        self.max_connections = max_connections
        self.min_range = min_range
        self.max_range = max_range
        self.town_probability = town_probability
        self.next_node_id = 0

    @classmethod
    def from_config(cls, config, rng: RandomSource) -> "NodeFactory":
        """Factory bounded by a GenerationConfig."""
        return cls(
            rng,
            min_connections=config.min_node_connections,
            max_connections=config.max_node_connections,
            min_range=config.min_node_distance,
            max_range=config.max_connection_distance,
            town_probability=config.town_probability,
        )

    def pick_variant(self) -> NodeVariant:
        if self.rng.chance(self.town_probability):
            return NodeVariant.TOWN
        return NodeVariant.VILLAGE

    def create(self, variant: NodeVariant, position: Tuple[float, float]) -> Node:
        max_connections = self.rng.randint(self.min_connections, self.max_connections)
        connection_range = self.rng.uniform(self.min_range, self.max_range)

        node = Node(
            id=self.next_node_id,
            position=(float(position[0]), float(position[1])),
            variant=variant,
            max_connections=max_connections,
            connection_range=connection_range,
        )
        self.next_node_id += 1
        return node
