from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Hard budgets to keep a search bounded.

    Both limits are checked between expansion steps; an expansion in progress always
    completes.
    """

    timeout_s: float = 10.0
    # Optional cap on node expansions, None for unlimited.
    max_expansions: int | None = None


@dataclass
class BudgetState:
    start_time: float
    expansions: int = 0


class BudgetController:
    def __init__(self, cfg: SearchConfig | None = None):
        self.cfg = cfg or SearchConfig()

    def start(self) -> BudgetState:
        return BudgetState(start_time=time.monotonic())

    def elapsed_s(self, state: BudgetState) -> float:
        return float(time.monotonic() - float(state.start_time))

    def timed_out(self, state: BudgetState) -> bool:
        return self.elapsed_s(state) > self.cfg.timeout_s

    def expansions_exhausted(self, state: BudgetState) -> bool:
        cap = self.cfg.max_expansions
        return cap is not None and state.expansions >= cap

    def stop_reason(self, state: BudgetState) -> str | None:
        if self.timed_out(state):
            return "timeout"
        if self.expansions_exhausted(state):
            return "budget"
        return None

    def note_expansion(self, state: BudgetState) -> None:
        state.expansions += 1
