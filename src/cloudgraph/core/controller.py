"""
View-State Controller.

Owns the expanded-node set and the filter state. Every intent is one atomic
state transition followed by a full recomputation; registered listeners are
notified synchronously with the new view.
"""

import logging
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

from .config import DashboardConfig
from .hierarchy import find_roots
from .types import FilterState, GraphData, GraphNode, ViewResult
from .view import compute_view
from .visibility import default_expanded

ViewListener = Callable[[ViewResult], None]

_CACHE_LIMIT = 64


class ViewStateController:
    """
    Drives the dashboard view from user intents.

    The expanded set is copy-on-write: each mutation binds a new frozenset,
    so snapshots handed to listeners never change underneath them.

    Usage:
        controller = ViewStateController(SAMPLE_DATA)
        controller.toggle_expand("aws1")
        controller.set_filter({"issueType": "alerts"})
        print(controller.view.stats.total_alerts)
    """

    def __init__(self, data: GraphData, config: Optional[DashboardConfig] = None):
        self.config = config or DashboardConfig()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._listeners: List[ViewListener] = []
        self._filters = FilterState()
        self._selected: Optional[GraphNode] = None
        self._cache: Dict[Tuple[FrozenSet[str], FilterState], ViewResult] = {}
        self._load(data)

    def _load(self, data: GraphData) -> None:
        self._data = data
        self._roots = find_roots(data)
        self._expanded = default_expanded(data)
        self._cache.clear()

    @property
    def data(self) -> GraphData:
        return self._data

    @property
    def expanded(self) -> FrozenSet[str]:
        return self._expanded

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def selected(self) -> Optional[GraphNode]:
        return self._selected

    @property
    def roots(self) -> List[str]:
        return list(self._roots)

    @property
    def view(self) -> ViewResult:
        """Current view, memoised per (expanded, filters)."""
        key = (self._expanded, self._filters)
        if key not in self._cache:
            if len(self._cache) >= _CACHE_LIMIT:
                self._cache.clear()
            self._cache[key] = compute_view(
                self._data,
                self._expanded,
                self._filters,
                layout=self.config.layout,
                critical_threshold=self.config.severity.critical_alerts,
            )
        return self._cache[key]

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self) -> ViewResult:
        result = self.view
        for listener in list(self._listeners):
            listener(result)
        return result

    # Expansion

    def is_expanded(self, node_id: str) -> bool:
        return node_id in self._expanded

    def toggle_expand(self, node_id: str) -> ViewResult:
        """
        Flip a node's expansion.

        Collapsing also drops the node's listed children from the expanded
        set so they come back collapsed on the next expand.
        """
        if node_id in self._expanded:
            removed = {node_id}
            node = self._data.get_node(node_id)
            if node is not None:
                removed.update(node.children)
            self._expanded = self._expanded - removed
            self._logger.debug(f"Collapsed {node_id}")
        else:
            if not self._data.has_node(node_id):
                self._logger.debug(f"Expanding unknown node id '{node_id}'")
            self._expanded = self._expanded | {node_id}
            self._logger.debug(f"Expanded {node_id}")
        return self._commit()

    def expand_all(self) -> ViewResult:
        self._expanded = frozenset(self._data.node_ids)
        return self._commit()

    def collapse_all(self) -> ViewResult:
        self._expanded = frozenset(self._roots)
        return self._commit()

    # Filters

    def set_filter(self, patch: Optional[Dict[str, Any]] = None, **kwargs: Any) -> ViewResult:
        """Merge a partial update into the filter state."""
        self._filters = self._filters.merged({**(patch or {}), **kwargs})
        return self._commit()

    def reset_filter(self) -> ViewResult:
        self._filters = FilterState()
        return self._commit()

    # Selection

    def select_node(self, node_id: str) -> Optional[GraphNode]:
        """
        Record a node as selected and drill into it.

        Selecting a node that lists children also toggles its expansion.
        Unknown ids leave all state untouched and return None.
        """
        node = self._data.get_node(node_id)
        if node is None:
            self._logger.debug(f"Ignoring selection of unknown node '{node_id}'")
            return None

        self._selected = node
        if node.has_children:
            self.toggle_expand(node_id)
        else:
            self._commit()
        return node

    def clear_selection(self) -> None:
        self._selected = None

    # Data

    def replace_data(self, data: GraphData) -> ViewResult:
        """Swap the topology wholesale and reset expansion to defaults."""
        self._load(data)
        self._selected = None
        return self._commit()
