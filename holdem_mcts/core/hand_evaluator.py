"""Texas Hold'em hand evaluation engine.

Classifies the best 5-card hand in a set of 5 or more cards with a single
pass over per-rank and per-suit tallies (no 5-card combination search).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import total_ordering

from holdem_mcts.utils.card import Card
from holdem_mcts.utils.constants import ACE, HandRanking

# Top ranks of the wheel (A-2-3-4-5) and of the lowest regular straight
_WHEEL_HIGH = 3
_WHEEL_RANKS = frozenset({ACE, 0, 1, 2, 3})


@total_ordering
@dataclass(frozen=True)
class HandResult:
    """Result of evaluating a poker hand.

    ``key`` is the ordered tuple ``(category, tiebreak1, tiebreak2, ...)``.
    Comparison is lexicographic over it, so a shorter key only loses when
    every compared element is equal.
    """

    ranking: HandRanking
    tiebreak: tuple[int, ...] = ()

    @property
    def key(self) -> tuple[int, ...]:
        return (int(self.ranking), *self.tiebreak)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.key < other.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandResult):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.ranking.name} {self.tiebreak}"


def straight_high(ranks: Iterable[int]) -> int | None:
    """Return the top rank index of the best straight in ``ranks``, or None.

    Windows are scanned from ace-high (12) down to six-high (4); the wheel
    A-2-3-4-5 counts as top rank 3 and is only considered when no higher
    straight qualifies.
    """
    unique = set(ranks)
    for high in range(ACE, 3, -1):
        if all((high - i) % 13 in unique for i in range(5)):
            return high
    if _WHEEL_RANKS <= unique:
        return _WHEEL_HIGH
    return None


def _top(ranks: Iterable[int], count: int, *exclude: int) -> list[int]:
    """Highest ``count`` ranks, descending, skipping excluded ranks."""
    return sorted((r for r in ranks if r not in exclude), reverse=True)[:count]


class HandEvaluator:
    """Evaluates poker hands and compares showdowns."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandResult:
        """Evaluate the best 5-card hand from a collection of cards.

        Args:
            cards: 5 to 7 cards (hole cards + community cards).

        Returns:
            HandResult whose key totally orders hands.

        Raises:
            ValueError: If fewer than 5 cards are provided.
        """
        if len(cards) < 5:
            raise ValueError(f"Need at least 5 cards, got {len(cards)}")

        rank_counts = [0] * 13
        ranks: list[int] = []
        suit_to_ranks: dict[int, list[int]] = {}
        for card in cards:
            rank = card.rank_index
            rank_counts[rank] += 1
            ranks.append(rank)
            suit_to_ranks.setdefault(card.suit_index, []).append(rank)

        flush_ranks = HandEvaluator._flush_ranks(suit_to_ranks)

        if flush_ranks is not None:
            flush_high = straight_high(flush_ranks)
            if flush_high == ACE:
                return HandResult(HandRanking.ROYAL_FLUSH)
            if flush_high is not None:
                return HandResult(HandRanking.STRAIGHT_FLUSH, (flush_high,))

        for rank in range(ACE, -1, -1):
            if rank_counts[rank] == 4:
                kicker = _top(ranks, 1, rank)
                return HandResult(HandRanking.FOUR_OF_A_KIND, (rank, *kicker))

        # Highest rank with three or more is the triple; every other rank
        # with two or more (including a second triple) counts as a pair.
        triple: int | None = None
        pairs: list[int] = []
        for rank in range(ACE, -1, -1):
            if rank_counts[rank] >= 3 and triple is None:
                triple = rank
            elif rank_counts[rank] >= 2:
                pairs.append(rank)

        if triple is not None and pairs:
            return HandResult(HandRanking.FULL_HOUSE, (triple, pairs[0]))

        if flush_ranks is not None:
            return HandResult(HandRanking.FLUSH, tuple(_top(flush_ranks, 5)))

        high = straight_high(ranks)
        if high is not None:
            return HandResult(HandRanking.STRAIGHT, (high,))

        if triple is not None:
            kickers = _top(ranks, 2, triple)
            return HandResult(HandRanking.THREE_OF_A_KIND, (triple, *kickers))

        if len(pairs) >= 2:
            high_pair, low_pair = pairs[0], pairs[1]
            kicker = _top(ranks, 1, high_pair, low_pair)
            return HandResult(
                HandRanking.TWO_PAIR, (high_pair, low_pair, *kicker)
            )

        if pairs:
            kickers = _top(ranks, 3, pairs[0])
            return HandResult(HandRanking.ONE_PAIR, (pairs[0], *kickers))

        return HandResult(HandRanking.HIGH_CARD, tuple(_top(ranks, 5)))

    @staticmethod
    def _flush_ranks(suit_to_ranks: dict[int, list[int]]) -> list[int] | None:
        """Ranks of the flush suit, or None when no suit has 5 cards.

        Only inputs larger than 9 cards can hold two flush suits; the
        stronger one wins.
        """
        candidates = [r for r in suit_to_ranks.values() if len(r) >= 5]
        if not candidates:
            return None
        if len(candidates) == 1:
            return candidates[0]

        def strength(suit_ranks: list[int]) -> tuple[int, list[int]]:
            high = straight_high(suit_ranks)
            return (-1 if high is None else high, _top(suit_ranks, 5))

        return max(candidates, key=strength)

    @staticmethod
    def compare(
        hand1: Sequence[Card],
        hand2: Sequence[Card],
        board: Sequence[Card],
    ) -> int:
        """Showdown two hole-card hands on a shared board.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 on a tie.
        """
        eval1 = HandEvaluator.evaluate([*hand1, *board])
        eval2 = HandEvaluator.evaluate([*hand2, *board])
        if eval1 > eval2:
            return 1
        if eval1 < eval2:
            return -1
        return 0
