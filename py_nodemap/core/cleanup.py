"""Removal of nodes left without connections."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import structlog

from .nodes import Node

logger = structlog.get_logger()


@dataclass
class CleanupReport:
    """Counts from a cleanup pass."""

    generated: int
    discarded: int

    @property
    def kept(self) -> int:
        return self.generated - self.discarded


class GraphCleaner:
    """Discards isolated nodes after the connection pass."""

    def __init__(self):
        self.report: Optional[CleanupReport] = None

    def clean(self, nodes: Sequence[Node]) -> List[Node]:
        """
        Return the nodes that hold at least one connection, in their original order.

        The input sequence is left untouched.
        """
        isolated = {id(n) for n in nodes if n.connection_count == 0}
        kept = [n for n in nodes if id(n) not in isolated]

        self.report = CleanupReport(generated=len(nodes), discarded=len(isolated))
        logger.info(
            "Discarded isolated nodes",
            discarded=self.report.discarded,
            generated=self.report.generated,
        )
        return kept
