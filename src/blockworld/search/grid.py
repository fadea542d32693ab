from __future__ import annotations

import numpy as np

from .graph import Edge

Cell = tuple[int, int]

_MOVES = ((0, 1), (1, 0), (0, -1), (-1, 0))


class GridGraph:
    """4-connected grid over a boolean wall mask (True = blocked), unit step cost.

    Used as a reference graph for the A* engine: `manhattan` is an admissible
    heuristic on it.
    """

    def __init__(self, walls: np.ndarray):
        walls = np.asarray(walls, dtype=bool)
        if walls.ndim != 2:
            raise ValueError(f"walls must be 2-D, got shape {walls.shape}")
        self.walls = walls

    @classmethod
    def random(cls, rows: int, cols: int, density: float = 0.2, seed: int = 0) -> GridGraph:
        rng = np.random.default_rng(seed)
        return cls(rng.random((rows, cols)) < float(density))

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self.walls.shape[0]), int(self.walls.shape[1]))

    def is_free(self, cell: Cell) -> bool:
        r, c = cell
        rows, cols = self.shape
        return 0 <= r < rows and 0 <= c < cols and not bool(self.walls[r, c])

    def outgoing_edges(self, node: Cell) -> list[Edge[Cell]]:
        r, c = node
        out: list[Edge[Cell]] = []
        for dr, dc in _MOVES:
            nxt = (r + dr, c + dc)
            if self.is_free(nxt):
                out.append(Edge(node, nxt, 1.0))
        return out

    @staticmethod
    def manhattan(a: Cell, b: Cell) -> float:
        return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))

    def __str__(self) -> str:
        return "\n".join("".join("#" if w else "." for w in row) for row in self.walls.tolist())
