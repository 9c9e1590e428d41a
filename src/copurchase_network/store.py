from __future__ import annotations

import logging
from collections import Counter
from importlib import resources

from pydantic import ValidationError

from .models import NetworkData, Node

logger = logging.getLogger(__name__)

DATA_PACKAGE = "copurchase_network.data"
DATA_RESOURCE = "amazon_co_purchase_network.json"


class LoadError(RuntimeError):
    """The network document is missing or cannot be parsed. Fatal at startup."""


def load(raw: bytes | str | None) -> NetworkData:
    """Parse a cleaned network document (`nodes`, `links`, `metadata`)."""
    if raw is None or not raw.strip():
        logger.error("Network document is empty")
        raise LoadError("network document is empty")

    try:
        data = NetworkData.model_validate_json(raw)
    except ValidationError as e:
        logger.error("Failed to parse network document: %s", e)
        raise LoadError(f"cannot parse network document: {e.error_count()} error(s)") from e

    logger.info(
        "Loaded network data: %d nodes, %d links (declared %d nodes, %d edges)",
        len(data.nodes),
        len(data.links),
        data.metadata.total_nodes,
        data.metadata.total_edges,
    )
    return data


def load_bundled() -> NetworkData:
    """Load the dataset packaged with the service."""
    try:
        raw = resources.files(DATA_PACKAGE).joinpath(DATA_RESOURCE).read_bytes()
    except (FileNotFoundError, ModuleNotFoundError) as e:
        logger.error("Bundled network data %s is missing: %s", DATA_RESOURCE, e)
        raise LoadError(f"bundled network data {DATA_RESOURCE} is missing") from e
    return load(raw)


def build_index(nodes: list[Node]) -> dict[int, Node]:
    # Duplicate ids: the last node in document order wins.
    index = {n.id: n for n in nodes}
    if len(index) != len(nodes):
        dupes = sum(1 for c in Counter(n.id for n in nodes).values() if c > 1)
        logger.warning("Network data has %d duplicate node id(s); keeping the last occurrence", dupes)
    return index


class GraphStore:
    """Immutable in-memory network with id lookup.

    Built once at startup and shared read-only by every request handler.
    """

    __slots__ = ("_data", "_index")

    def __init__(self, data: NetworkData):
        self._data = data
        self._index = build_index(data.nodes)

    @classmethod
    def from_bytes(cls, raw: bytes | str | None) -> "GraphStore":
        return cls(load(raw))

    @classmethod
    def from_bundled(cls) -> "GraphStore":
        return cls(load_bundled())

    @property
    def data(self) -> NetworkData:
        return self._data

    def get_by_id(self, node_id: int) -> Node | None:
        return self._index.get(node_id)
