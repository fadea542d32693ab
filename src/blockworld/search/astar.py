"""Graph-agnostic A* search with a wall-clock budget.

Each step pops the open entry with the lowest f = g + h (earliest stamped entry on
ties), returns if it satisfies the goal, otherwise closes it and relaxes its
outgoing edges. An open entry is only ever replaced by a strictly cheaper path,
so the stored g of a node is always the best known one.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import replace
from typing import TypeVar

from ..budget import BudgetController, SearchConfig
from ..tracing import TraceSink, emit
from .frontier import Frontier, SearchNode
from .graph import Graph, NoPath, SearchResult, node_key_of

N = TypeVar("N")


def _h(heuristic: Callable[[N], float], node: N) -> float:
    h = float(heuristic(node))
    if h < 0:
        raise ValueError(f"Heuristic must be non-negative, got {h} for {node!r}")
    return h


def search(
    graph: Graph[N],
    start: N,
    is_goal: Callable[[N], bool],
    heuristic: Callable[[N], float],
    timeout_s: float | None = None,
    *,
    cfg: SearchConfig | None = None,
    trace: TraceSink | None = None,
) -> SearchResult[N] | NoPath:
    """Find a cheapest path from `start` to any node satisfying `is_goal`.

    `timeout_s` overrides ``cfg.timeout_s``. Returns NoPath (never a partial path)
    when the frontier runs dry or a budget is spent.
    """
    cfg = cfg or SearchConfig()
    if timeout_s is not None:
        cfg = replace(cfg, timeout_s=float(timeout_s))
    budget = BudgetController(cfg)
    state = budget.start()
    key_of = node_key_of(graph)

    open_set = Frontier()
    closed: set[Hashable] = set()
    open_set.push(SearchNode(node=start, key=key_of(start), parent=None, g=0.0, f=_h(heuristic, start)))
    emit(trace, "search.start", timeout_s=cfg.timeout_s, max_expansions=cfg.max_expansions)

    def _no_path(reason: str) -> NoPath:
        elapsed = budget.elapsed_s(state)
        emit(trace, "search.done", found=False, reason=reason, expanded=state.expansions, elapsed_s=elapsed)
        return NoPath(reason=reason, expanded=state.expansions, elapsed_s=elapsed)

    while True:
        if not open_set:
            return _no_path("exhausted")
        reason = budget.stop_reason(state)
        if reason is not None:
            return _no_path(reason)

        current = open_set.pop()
        if is_goal(current.node):
            elapsed = budget.elapsed_s(state)
            emit(
                trace,
                "search.done",
                found=True,
                cost=current.g,
                length=len(current.path()),
                expanded=state.expansions,
                elapsed_s=elapsed,
            )
            return SearchResult(path=current.path(), cost=current.g, expanded=state.expansions, elapsed_s=elapsed)

        closed.add(current.key)
        budget.note_expansion(state)
        for edge in graph.outgoing_edges(current.node):
            if edge.cost < 0:
                raise ValueError(f"Negative edge cost {edge.cost} from {current.node!r}")
            key = key_of(edge.target)
            if key in closed:
                continue
            g = current.g + float(edge.cost)
            existing = open_set.get(key)
            if existing is not None and existing.g <= g:
                continue
            entry = SearchNode(node=edge.target, key=key, parent=current, g=g, f=g + _h(heuristic, edge.target))
            if existing is None:
                open_set.push(entry)
            else:
                open_set.replace(entry)
