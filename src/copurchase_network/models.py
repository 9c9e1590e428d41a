from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    """A product in the co-purchase network.

    `degree` is precomputed by the cleaning step and trusted as-is.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    asin: str | None = None
    title: str | None = None
    group: str | None = None
    degree: int


class Link(BaseModel):
    """An undirected co-purchase relation between two product ids."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    source: int
    target: int


class Metadata(BaseModel):
    # Declared counts from the cleaning step; never checked against the actual lists.
    model_config = ConfigDict(frozen=True, extra="ignore")

    total_nodes: int
    total_edges: int
    cleaned_at: str


class NetworkData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    nodes: list[Node] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    metadata: Metadata


class NetworkStatistics(BaseModel):
    """Overview numbers shown by the statistics panel.

    The first three fields are copied from `Metadata`; the rest are computed over
    the loaded nodes and may disagree with it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_nodes: int = Field(alias="totalNodes")
    total_edges: int = Field(alias="totalEdges")
    cleaned_at: str = Field(alias="cleanedAt")
    group_distribution: dict[str, int] = Field(default_factory=dict, alias="groupDistribution")
    average_degree: float = Field(default=0.0, alias="averageDegree")
    max_degree: int = Field(default=0, alias="maxDegree")
    min_degree: int = Field(default=0, alias="minDegree")
