"""
Core type definitions for cloudgraph.

Input models mirror the JSON shape the dashboard is fed with (nodes plus
parent -> child edges). Derived models describe one render cycle: the
hierarchy, positioned nodes, projected edges and aggregate stats.
"""

import logging
import math
from enum import StrEnum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# Type tags that always get a bucket in Stats.type_counts
KNOWN_NODE_TYPES: Tuple[str, ...] = ("cloud", "aws", "gcp", "service")


class IssueType(StrEnum):
    """Issue classes a user can narrow the graph to."""
    ALL = "all"
    ALERTS = "alerts"
    MISCONFIGURATIONS = "misconfigurations"


def _clamp_count(value: Any) -> int:
    """Coerce a count or threshold to a finite, non-negative int."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        if value < 0:
            logger.debug(f"Negative count {value!r} clamped to 0")
            return 0
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Non-numeric count {value!r} clamped to 0")
        return 0
    if not math.isfinite(number) or number < 0:
        logger.debug(f"Out-of-range count {value!r} clamped to 0")
        return 0
    return int(number)


class GraphNode(BaseModel):
    """
    A single resource in the cloud topology.

    ``children`` is an informational hint used for the collapse cascade and
    for display. Parent/child structure is always derived from edges.
    """
    id: str
    label: str
    type: str
    alerts: int = 0
    misconfigs: int = 0
    children: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("alerts", "misconfigs", mode="before")
    @classmethod
    def _non_negative(cls, value: Any) -> int:
        return _clamp_count(value)

    @field_validator("children", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def has_children(self) -> bool:
        return bool(self.children)


class GraphEdge(BaseModel):
    """Directed parent -> child relationship."""
    source: str
    target: str

    model_config = ConfigDict(extra="ignore")


class GraphData(BaseModel):
    """
    Flat node/edge input for one dashboard.

    Duplicate node ids resolve last-write-wins: the node value comes from the
    final occurrence while encounter order keeps the first occurrence's slot.
    Edges with an endpoint outside the node set are dangling and are dropped
    from every derived computation.
    """
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    _by_id: Dict[str, GraphNode] = PrivateAttr(default_factory=dict)
    _edges: List[GraphEdge] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context) -> None:
        by_id: Dict[str, GraphNode] = {}
        for node in self.nodes:
            if node.id in by_id:
                logger.debug(f"Duplicate node id '{node.id}', last definition wins")
            by_id[node.id] = node
        self._by_id = by_id

        valid = []
        for edge in self.edges:
            if edge.source in by_id and edge.target in by_id:
                valid.append(edge)
            else:
                logger.debug(f"Ignoring dangling edge {edge.source} -> {edge.target}")
        self._edges = valid

    @property
    def node_map(self) -> Dict[str, GraphNode]:
        """Nodes keyed by id, in encounter order."""
        return dict(self._by_id)

    @property
    def node_ids(self) -> List[str]:
        return list(self._by_id)

    @property
    def valid_edges(self) -> List[GraphEdge]:
        """Edges whose endpoints both exist, in input order."""
        return list(self._edges)

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self._by_id.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._by_id

    def iter_nodes(self):
        return iter(self._by_id.values())

    def duplicate_ids(self) -> List[str]:
        """Ids defined more than once in the raw node list."""
        seen = set()
        dupes: List[str] = []
        for node in self.nodes:
            if node.id in seen and node.id not in dupes:
                dupes.append(node.id)
            seen.add(node.id)
        return dupes

    def dangling_edges(self) -> List[GraphEdge]:
        return [
            e for e in self.edges
            if e.source not in self._by_id or e.target not in self._by_id
        ]


class HierarchyEntry(BaseModel):
    """Position of a node in the inferred forest."""
    level: int
    parent_id: Optional[str] = None
    sibling_index: int = 0

    model_config = ConfigDict(frozen=True)


class FilterState(BaseModel):
    """
    User-controlled filter configuration.

    Frozen so it can key memoised views. Accepts camelCase aliases
    (``issueType``, ``alertThreshold`` ...) alongside field names.
    """
    issue_type: IssueType = IssueType.ALL
    node_type: str = "all"
    alert_threshold: int = 0
    misconfig_threshold: int = 0
    expanded_only: bool = False

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @field_validator("issue_type", mode="before")
    @classmethod
    def _known_issue_type(cls, value: Any) -> Any:
        if isinstance(value, IssueType):
            return value
        try:
            return IssueType(str(value).lower())
        except ValueError:
            logger.warning(f"Unknown issue type {value!r}, falling back to 'all'")
            return IssueType.ALL

    @field_validator("node_type", mode="before")
    @classmethod
    def _node_type_default(cls, value: Any) -> Any:
        return "all" if value in (None, "") else value

    @field_validator("alert_threshold", "misconfig_threshold", mode="before")
    @classmethod
    def _clamp_threshold(cls, value: Any) -> int:
        # Sliders report a one-element list
        if isinstance(value, (list, tuple)):
            value = value[0] if value else 0
        return _clamp_count(value)

    @property
    def is_default(self) -> bool:
        return self == FilterState()

    def merged(self, patch: Dict[str, Any]) -> "FilterState":
        """Return a new state with ``patch`` applied on top of this one."""
        by_alias = {f.alias: name for name, f in type(self).model_fields.items()}
        values = self.model_dump()
        for key, value in patch.items():
            name = by_alias.get(key, key)
            if name not in values:
                logger.debug(f"Ignoring unknown filter key '{key}'")
                continue
            values[name] = value
        return type(self).model_validate(values)


class PositionedNode(BaseModel):
    """A visible node with layout coordinates and per-render flags."""
    id: str
    label: str
    type: str
    alerts: int
    misconfigs: int
    children: List[str] = Field(default_factory=list)
    x: float
    y: float
    level: int
    is_expanded: bool = False
    hidden: bool = False

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @classmethod
    def from_node(
        cls, node: GraphNode, x: float, y: float, level: int, is_expanded: bool
    ) -> "PositionedNode":
        return cls(
            **node.model_dump(),
            x=x,
            y=y,
            level=level,
            is_expanded=is_expanded,
        )


class ProjectedEdge(BaseModel):
    """An edge between two visible nodes."""
    id: str
    source: str
    target: str

    @classmethod
    def from_edge(cls, edge: GraphEdge) -> "ProjectedEdge":
        return cls(id=f"{edge.source}-{edge.target}", source=edge.source, target=edge.target)


class Stats(BaseModel):
    """Aggregates over shown (visible and not hidden) nodes."""
    total_alerts: int = 0
    total_misconfigurations: int = 0
    critical_alerts: int = 0
    total_providers: int = 0
    type_counts: Dict[str, int] = Field(default_factory=dict)
    shown_nodes: int = 0
    hidden_nodes: int = 0

    @property
    def cloud_nodes(self) -> int:
        return self.type_counts.get("cloud", 0)

    @property
    def aws_nodes(self) -> int:
        return self.type_counts.get("aws", 0)

    @property
    def gcp_nodes(self) -> int:
        return self.type_counts.get("gcp", 0)

    @property
    def service_nodes(self) -> int:
        return self.type_counts.get("service", 0)


class ViewResult(BaseModel):
    """Everything the rendering layer needs for one frame."""
    nodes: List[PositionedNode] = Field(default_factory=list)
    edges: List[ProjectedEdge] = Field(default_factory=list)
    stats: Stats = Field(default_factory=Stats)

    @property
    def shown_nodes(self) -> List[PositionedNode]:
        return [n for n in self.nodes if not n.hidden]

    @property
    def visible_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def get_node(self, node_id: str) -> Optional[PositionedNode]:
        return next((n for n in self.nodes if n.id == node_id), None)
