"""Aggregate statistics over the shown node set."""

from collections import Counter
from typing import Iterable

from .types import KNOWN_NODE_TYPES, PositionedNode, Stats

CRITICAL_ALERT_THRESHOLD = 100


def aggregate(
    nodes: Iterable[PositionedNode],
    critical_threshold: int = CRITICAL_ALERT_THRESHOLD,
) -> Stats:
    """
    Summarise nodes whose hidden flag is False.

    ``critical_alerts`` counts nodes whose own alert count exceeds the
    threshold; it is not derived from the total. ``type_counts`` always
    includes the known provider tags and adds any other tag present.
    """
    nodes = list(nodes)
    shown = [n for n in nodes if not n.hidden]

    by_type = Counter(n.type for n in shown)
    type_counts = {tag: by_type.get(tag, 0) for tag in KNOWN_NODE_TYPES}
    for tag, count in by_type.items():
        type_counts.setdefault(tag, count)

    return Stats(
        total_alerts=sum(n.alerts for n in shown),
        total_misconfigurations=sum(n.misconfigs for n in shown),
        critical_alerts=sum(1 for n in shown if n.alerts > critical_threshold),
        total_providers=len(by_type),
        type_counts=type_counts,
        shown_nodes=len(shown),
        hidden_nodes=len(nodes) - len(shown),
    )
