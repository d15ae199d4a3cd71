"""MCTSEngine: time-bounded Monte Carlo Tree Search for Stay/Fold.

Every iteration selects a leaf by UCB1, expands one child, plays one
random rollout and backpropagates the result to the root. When the time
budget runs out, the root's statistics become the decision.

The loop polls a monotonic clock between iterations only: a started
iteration always completes, so the last one may overrun the budget.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

import numpy as np

from holdem_mcts.core.rollout import RolloutSimulator
from holdem_mcts.search.config import SearchConfig
from holdem_mcts.search.data_structures import DecisionResult
from holdem_mcts.search.tree import SearchTree
from holdem_mcts.utils.card import FULL_DECK, Card, parse_cards
from holdem_mcts.utils.constants import BOARD_CARDS, HOLE_CARDS, Decision
from holdem_mcts.utils.errors import InsufficientDeck, RootNeverVisited

logger = logging.getLogger("holdem_mcts.search")


class MCTSEngine:
    """Stay/Fold decision engine.

    Implements DecisionEngine. Holds only configuration: each decide()
    call builds its own tree and random generator and drops them on return.

    Usage:
        engine = MCTSEngine(SearchConfig(time_budget_ms=2_000))
        result = engine.decide("A♠ K♥", "")
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.config = config or SearchConfig()
        self._clock = clock

    def decide(
        self,
        my_cards: str | Iterable[Card | str],
        table_cards: str | Iterable[Card | str] = (),
    ) -> DecisionResult:
        """Estimate the win rate of a hand and decide Stay or Fold.

        Args:
            my_cards: Exactly 2 hole cards.
            table_cards: 0-5 revealed community cards.

        Returns:
            DecisionResult with root visits, wins, win rate and decision.

        Raises:
            InvalidCard: If a card token is malformed.
            ValueError: On a wrong card count or duplicate cards.
            InsufficientDeck: If the unseen cards cannot cover a rollout.
            RootNeverVisited: If no rollout completed within the budget.
        """
        mine, table = self._validate(my_cards, table_cards)
        seen = frozenset(mine) | frozenset(table)
        self._check_deck(seen, table)

        config = self.config
        tree = SearchTree(exploration=config.exploration)
        simulator = RolloutSimulator(np.random.default_rng(config.seed))
        budget_s = config.time_budget_s
        cap = config.max_iterations

        logger.debug(
            "Search start: hole=%s table=%s seen=%d budget=%.0fms cap=%s",
            _fmt(mine), _fmt(table), len(seen), config.time_budget_ms, cap,
        )

        t_start = self._clock()
        iterations = 0
        while self._clock() - t_start < budget_s:
            if cap is not None and iterations >= cap:
                break
            leaf = tree.select()
            child = tree.expand(leaf)
            win = simulator.simulate(mine, table, seen)
            tree.backpropagate(child, win)
            iterations += 1
        elapsed_ms = (self._clock() - t_start) * 1000

        root = tree.root
        if root.visits == 0:
            raise RootNeverVisited(config.time_budget_ms)

        win_rate = root.wins / root.visits
        decision = (
            Decision.STAY if win_rate >= config.stay_threshold else Decision.FOLD
        )
        result = DecisionResult(
            decision=decision,
            visits=root.visits,
            wins=root.wins,
            win_rate=win_rate,
            elapsed_ms=elapsed_ms,
            tree_size=len(tree),
        )

        logger.info(
            "%s | %s → %s (visits=%d, wins=%d, win=%.2f%%, %.1fms, %.0f rollouts/s)",
            _fmt(mine),
            _fmt(table),
            decision.value,
            result.visits,
            result.wins,
            result.win_pct,
            elapsed_ms,
            result.visits / (elapsed_ms / 1000) if elapsed_ms > 0 else 0.0,
        )
        return result

    @staticmethod
    def _validate(
        my_cards: str | Iterable[Card | str],
        table_cards: str | Iterable[Card | str],
    ) -> tuple[list[Card], list[Card]]:
        mine = parse_cards(my_cards)
        table = parse_cards(table_cards)
        if len(mine) != HOLE_CARDS:
            raise ValueError(f"Need exactly {HOLE_CARDS} hole cards, got {len(mine)}")
        if len(table) > BOARD_CARDS:
            raise ValueError(
                f"At most {BOARD_CARDS} community cards, got {len(table)}"
            )
        known = mine + table
        if len(set(known)) != len(known):
            dupes = sorted({c for c in known if known.count(c) > 1})
            raise ValueError(f"Duplicate cards: {_fmt(dupes)}")
        return mine, table

    @staticmethod
    def _check_deck(seen: frozenset[Card], table: list[Card]) -> None:
        needed = HOLE_CARDS + BOARD_CARDS - len(table)
        remaining = len(FULL_DECK) - len(seen)
        if needed > remaining:
            raise InsufficientDeck(needed=needed, remaining=remaining)


def decide(
    my_cards: str | Iterable[Card | str],
    table_cards: str | Iterable[Card | str] = (),
    config: SearchConfig | None = None,
) -> DecisionResult:
    """Run one decision with a throwaway MCTSEngine."""
    return MCTSEngine(config).decide(my_cards, table_cards)


def _fmt(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards) or "(none)"
