from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .models import Link, NetworkData, NetworkStatistics, Node
from .store import GraphStore

logger = logging.getLogger(__name__)

# Distribution bucket for nodes without a category label.
UNKNOWN_GROUP = "Unknown"


def _round2(value: float) -> float:
    return float(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(slots=True)
class NetworkQueryEngine:
    """Read-only queries over the loaded co-purchase network.

    Every method is a single pass over the node or link sequence. Nothing here
    mutates the store, so one engine can serve concurrent requests without locks.
    Unknown ids, unknown groups, blank keywords and non-positive limits all yield
    empty results; only `node_by_id` signals absence (with None).
    """

    store: GraphStore

    @property
    def _data(self) -> NetworkData:
        return self.store.data

    def full_graph(self) -> NetworkData:
        return self._data

    def statistics(self) -> NetworkStatistics:
        meta = self._data.metadata
        nodes = self._data.nodes
        degrees = [n.degree for n in nodes]

        stats = NetworkStatistics(
            total_nodes=meta.total_nodes,
            total_edges=meta.total_edges,
            cleaned_at=meta.cleaned_at,
            group_distribution=dict(Counter(n.group if n.group is not None else UNKNOWN_GROUP for n in nodes)),
            average_degree=_round2(sum(degrees) / len(degrees)) if degrees else 0.0,
            max_degree=max(degrees, default=0),
            min_degree=min(degrees, default=0),
        )
        logger.debug("Statistics computed: avg degree=%s, max degree=%s", stats.average_degree, stats.max_degree)
        return stats

    def all_groups(self) -> list[str]:
        return sorted({n.group for n in self._data.nodes if n.group is not None})

    def nodes_by_group(self, group: str) -> list[Node]:
        return [n for n in self._data.nodes if n.group == group]

    def node_by_id(self, node_id: int) -> Node | None:
        return self.store.get_by_id(node_id)

    def top_by_degree(self, limit: int = 10) -> list[Node]:
        if limit <= 0:
            return []
        # sorted() is stable with reverse=True, so ties keep document order.
        return sorted(self._data.nodes, key=lambda n: n.degree, reverse=True)[:limit]

    def links_for_node(self, node_id: int) -> list[Link]:
        return [link for link in self._data.links if link.source == node_id or link.target == node_id]

    def neighbors(self, node_id: int) -> list[Node]:
        if self.store.get_by_id(node_id) is None:
            return []

        # dict keeps first-seen order and collapses repeated edges.
        neighbor_ids: dict[int, None] = {}
        for link in self.links_for_node(node_id):
            other = link.target if link.source == node_id else link.source
            if other != node_id:
                neighbor_ids[other] = None

        out: list[Node] = []
        for nid in neighbor_ids:
            node = self.store.get_by_id(nid)
            if node is None:
                logger.debug("Link from node %s points at unknown node %s", node_id, nid)
                continue
            out.append(node)
        return out

    def search(self, keyword: str | None) -> list[Node]:
        if keyword is None or not keyword.strip():
            return []

        needle = keyword.lower()
        return [
            n
            for n in self._data.nodes
            if any(field is not None and needle in field.lower() for field in (n.title, n.group, n.asin))
        ]
