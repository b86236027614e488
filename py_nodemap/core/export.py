"""
Plain-data export of a generated node map.

Renderers and other consumers get positions, variants and connections as
pydantic models, so `model_dump()` / `model_dump_json()` give them a
serialisable view without holding references into the live node graph.
"""

from typing import List, Sequence, Tuple

from pydantic import BaseModel, Field

from .nodes import Node, NodeVariant


class NodeRecord(BaseModel):
    """Exported view of a single node."""

    id: int = Field(description="Placement index of the node")
    x: float = Field(description="X coordinate in map space")
    y: float = Field(description="Y coordinate in map space")
    variant: NodeVariant = Field(description="Settlement kind")
    color: str = Field(description="Display colour in hex format")
    max_connections: int = Field(description="Degree capacity")
    connection_range: float = Field(description="Reach of this node's connections")
    connections: List[int] = Field(
        default_factory=list, description="IDs of connected nodes"
    )


class NodeMapExport(BaseModel):
    """Exported node map: nodes plus an undirected edge list."""

    nodes: List[NodeRecord] = Field(default_factory=list)
    edges: List[Tuple[int, int]] = Field(
        default_factory=list, description="Each connection once, as (lower id, higher id)"
    )

    @property
    def town_count(self) -> int:
        return sum(1 for n in self.nodes if n.variant is NodeVariant.TOWN)

    @property
    def village_count(self) -> int:
        return sum(1 for n in self.nodes if n.variant is NodeVariant.VILLAGE)


def export_node_map(nodes: Sequence[Node]) -> NodeMapExport:
    records = []
    edges = set()
    for node in nodes:
        neighbour_ids = sorted(n.id for n in node.connections)
        records.append(
            NodeRecord(
                id=node.id,
                x=node.x,
                y=node.y,
                variant=node.variant,
                color=node.variant.color,
                max_connections=node.max_connections,
                connection_range=node.connection_range,
                connections=neighbour_ids,
            )
        )
        for other_id in neighbour_ids:
            edges.add((min(node.id, other_id), max(node.id, other_id)))

    return NodeMapExport(nodes=records, edges=sorted(edges))
