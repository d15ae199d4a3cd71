"""Core data structures for the search engine.

DecisionResult: read-only summary of one decision.
DecisionEngine: Interface that any decision backend must implement.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from holdem_mcts.utils.constants import Decision

if TYPE_CHECKING:
    from holdem_mcts.utils.card import Card


@dataclass(frozen=True)
class DecisionResult:
    """Aggregate root statistics and the thresholded decision.

    Attributes:
        decision: Stay or Fold.
        visits: Completed rollouts (root visit count).
        wins: Rollouts won or tied.
        win_rate: wins / visits in [0.0, 1.0].
        elapsed_ms: Wall-clock time spent searching.
        tree_size: Nodes in the search tree, root included.
    """

    decision: Decision
    visits: int
    wins: int
    win_rate: float
    elapsed_ms: float = 0.0
    tree_size: int = 0

    @property
    def losses(self) -> int:
        return self.visits - self.wins

    @property
    def win_pct(self) -> float:
        """Win probability as a percentage, rounded to 2 decimals."""
        return round(self.win_rate * 100, 2)

    def to_dict(self) -> dict[str, object]:
        return {
            "decision": self.decision.value,
            "visits": self.visits,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": self.win_rate,
            "win_pct": self.win_pct,
            "elapsed_ms": self.elapsed_ms,
            "tree_size": self.tree_size,
        }

    def __str__(self) -> str:
        return (
            f"{self.decision.value}: win {self.win_pct:.2f}% "
            f"(W: {self.wins}, L: {self.losses}, sims: {self.visits})"
        )


@runtime_checkable
class DecisionEngine(Protocol):
    """Interface for Stay/Fold backends.

    Any object with a matching ``decide`` method can stand in for the
    built-in MCTSEngine (e.g. a fixed stub in tests).
    """

    def decide(
        self,
        my_cards: str | Iterable[Card | str],
        table_cards: str | Iterable[Card | str] = (),
    ) -> DecisionResult: ...
