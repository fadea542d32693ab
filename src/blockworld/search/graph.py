from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

N = TypeVar("N")


@dataclass(frozen=True)
class Edge(Generic[N]):
    """A directed, weighted edge. Costs are non-negative."""
    source: N
    target: N
    cost: float


class Graph(Protocol[N]):
    """What the search engine needs from a graph.

    Nodes must be hashable unless the graph also provides ``node_key``, which maps a
    node to a hashable key; two nodes with equal keys are the same search node.
    """

    def outgoing_edges(self, node: N) -> Sequence[Edge[N]]:
        ...


def node_key_of(graph: Graph[N]):
    fn = getattr(graph, "node_key", None)
    if fn is None:
        return lambda node: node
    return fn


@dataclass(frozen=True)
class SearchResult(Generic[N]):
    """Path from start to a goal node (both inclusive) and its total cost."""
    path: list[N]
    cost: float
    expanded: int = 0
    elapsed_s: float = 0.0

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoPath:
    """No path was found.

    reason:
      - exhausted: every reachable node was expanded
      - timeout: the wall-clock budget ran out
      - budget: the expansion cap was reached
    Only "exhausted" means the goal is unreachable.
    """
    reason: str = "exhausted"
    expanded: int = 0
    elapsed_s: float = 0.0

    def __bool__(self) -> bool:
        return False
