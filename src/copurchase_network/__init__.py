"""Product co-purchase network service.

This package provides:
- Pydantic models for the cleaned co-purchase network document
- An in-memory graph store loaded once at startup
- A read-only query engine and the HTTP routes that expose it
"""

from .models import Link, Metadata, NetworkData, NetworkStatistics, Node
from .query_engine import NetworkQueryEngine
from .store import GraphStore, LoadError

__version__ = "0.1.0"

__all__ = [
    "GraphStore",
    "Link",
    "LoadError",
    "Metadata",
    "NetworkData",
    "NetworkQueryEngine",
    "NetworkStatistics",
    "Node",
    "__version__",
]
