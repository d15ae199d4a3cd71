"""Random rollouts: complete the unseen cards and resolve the showdown.

Each rollout draws a uniformly random opponent hand and runout from the
cards nobody has seen yet. Ties count toward staying.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from dataclasses import dataclass

import numpy as np

from holdem_mcts.core.hand_evaluator import HandEvaluator
from holdem_mcts.utils.card import Card, Deck
from holdem_mcts.utils.constants import BOARD_CARDS, HOLE_CARDS

logger = logging.getLogger("holdem_mcts.rollout")

_OUTCOME_NAMES = {1: "Win", 0: "Tie", -1: "Loss"}


@dataclass(frozen=True)
class Showdown:
    """One completed rollout.

    Attributes:
        opponent_cards: The opponent's random hole cards.
        future_cards: Community cards drawn to complete the board.
        board: Known table cards followed by ``future_cards`` (5 cards).
        result: 1 if we win, 0 on a tie, -1 if we lose.
    """

    opponent_cards: tuple[Card, ...]
    future_cards: tuple[Card, ...]
    board: tuple[Card, ...]
    result: int

    @property
    def stays(self) -> bool:
        """Win or tie."""
        return self.result >= 0

    @property
    def outcome(self) -> str:
        return _OUTCOME_NAMES[self.result]


class RolloutSimulator:
    """Plays out random continuations against a single random opponent.

    Usage:
        simulator = RolloutSimulator(np.random.default_rng(7))
        won = simulator.simulate(my_cards, table_cards, seen_cards)
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()

    def play_out(
        self,
        my_cards: Sequence[Card],
        table_cards: Sequence[Card],
        seen_cards: Collection[Card],
    ) -> Showdown:
        """Deal one random opponent hand and runout, then show down.

        Raises:
            ValueError: If more than 5 community cards are given.
            InsufficientDeck: If the unseen cards cannot cover the draws.
        """
        if len(table_cards) > BOARD_CARDS:
            raise ValueError(
                f"At most {BOARD_CARDS} community cards, got {len(table_cards)}"
            )
        deck = Deck(seen_cards, self._rng)
        deck.shuffle()

        opponent_cards = deck.deal(HOLE_CARDS)
        future_cards = deck.deal(BOARD_CARDS - len(table_cards))
        board = [*table_cards, *future_cards]

        result = HandEvaluator.compare(my_cards, opponent_cards, board)
        showdown = Showdown(
            opponent_cards=tuple(opponent_cards),
            future_cards=tuple(future_cards),
            board=tuple(board),
            result=result,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Rollout: opponent=%s future=%s board=%s -> %s",
                _fmt(showdown.opponent_cards),
                _fmt(showdown.future_cards),
                _fmt(showdown.board),
                showdown.outcome,
            )
        return showdown

    def simulate(
        self,
        my_cards: Sequence[Card],
        table_cards: Sequence[Card],
        seen_cards: Collection[Card],
    ) -> bool:
        """Run one rollout; True on a win or a tie."""
        return self.play_out(my_cards, table_cards, seen_cards).stays


def _fmt(cards: Sequence[Card]) -> str:
    return " ".join(str(c) for c in cards) or "(none)"
