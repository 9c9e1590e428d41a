from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from .models import Link, NetworkData, NetworkStatistics, Node
from .query_engine import NetworkQueryEngine

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "co-purchase network service is up"


def build_network_router(engine: NetworkQueryEngine, *, prefix: str = "/api/network") -> APIRouter:
    r = APIRouter(prefix=prefix, tags=["network"])

    @r.get("/full", response_model=NetworkData)
    async def full_network():
        data = engine.full_graph()
        logger.info("GET /full -> %d nodes, %d links", len(data.nodes), len(data.links))
        return data

    @r.get("/statistics", response_model=NetworkStatistics)
    async def statistics():
        stats = engine.statistics()
        logger.info("GET /statistics -> %d groups", len(stats.group_distribution))
        return stats

    @r.get("/groups", response_model=list[str])
    async def groups():
        out = engine.all_groups()
        logger.info("GET /groups -> %d groups", len(out))
        return out

    @r.get("/nodes/group/{group}", response_model=list[Node])
    async def nodes_by_group(group: str):
        out = engine.nodes_by_group(group)
        logger.info("GET /nodes/group/%s -> %d nodes", group, len(out))
        return out

    # Static /nodes/* paths must be registered before /nodes/{node_id}.
    @r.get("/nodes/highly-connected", response_model=list[Node])
    async def highly_connected(limit: int = 10):
        out = engine.top_by_degree(limit)
        logger.info("GET /nodes/highly-connected limit=%d -> %d nodes", limit, len(out))
        return out

    @r.get("/nodes/search", response_model=list[Node])
    async def search(keyword: str | None = None):
        out = engine.search(keyword)
        logger.info("GET /nodes/search keyword=%r -> %d nodes", keyword, len(out))
        return out

    @r.get("/nodes/{node_id}", response_model=Node)
    async def node_detail(node_id: int):
        node = engine.node_by_id(node_id)
        if node is None:
            logger.warning("GET /nodes/%d -> not found", node_id)
            raise HTTPException(status_code=404, detail=f"node {node_id} not found")
        logger.info("GET /nodes/%d -> %s", node_id, node.title)
        return node

    @r.get("/nodes/{node_id}/neighbors", response_model=list[Node])
    async def neighbors(node_id: int):
        out = engine.neighbors(node_id)
        logger.info("GET /nodes/%d/neighbors -> %d nodes", node_id, len(out))
        return out

    @r.get("/nodes/{node_id}/links", response_model=list[Link])
    async def links(node_id: int):
        out = engine.links_for_node(node_id)
        logger.info("GET /nodes/%d/links -> %d links", node_id, len(out))
        return out

    @r.get("/health", response_class=PlainTextResponse)
    async def health():
        return HEALTH_MESSAGE

    return r
