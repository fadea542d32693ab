"""Generic A* search.

The engine only needs `outgoing_edges(node)` from a graph; see `graph.Graph`.
"""

from .astar import search
from .frontier import Frontier, SearchNode
from .graph import Edge, Graph, NoPath, SearchResult
from .grid import GridGraph

__all__ = ["Edge", "Frontier", "Graph", "GridGraph", "NoPath", "SearchNode", "SearchResult", "search"]
