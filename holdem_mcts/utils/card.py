"""Card and Deck classes: the 52-card universe and the unseen-card pool."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

import numpy as np

from holdem_mcts.utils.constants import (
    RANK_ALIASES,
    RANK_INDEX,
    SUIT_ALIASES,
    SUIT_INDEX,
    Rank,
    Suit,
)
from holdem_mcts.utils.errors import InsufficientDeck, InvalidCard

_TOKEN_RE = re.compile(r"(10|[2-9TJQKA])([♠♥♦♣SHDC])\ufe0f?", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[\s,]+")


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def from_str(cls, s: str) -> Card:
        """Create a Card from a token like 'A♠', '10♥' or 'Th'.

        Args:
            s: Rank symbol (2-10, J, Q, K, A, or T for ten) followed by a
               suit symbol (♠ ♥ ♦ ♣, or s h d c).

        Returns:
            A new Card instance.

        Raises:
            InvalidCard: If the rank or suit symbol is not recognized.
        """
        if not isinstance(s, str):
            raise InvalidCard(s, "expected a string token")
        token = s.strip().replace("\ufe0f", "")
        if len(token) < 2:
            raise InvalidCard(s, "too short")
        return cls(rank=_parse_rank(s, token[:-1]), suit=_parse_suit(s, token[-1]))

    @property
    def rank_index(self) -> int:
        """Rank index 0..12 (2 through A)."""
        return RANK_INDEX[self.rank]

    @property
    def suit_index(self) -> int:
        """Suit index 0..3."""
        return SUIT_INDEX[self.suit]

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.rank_index, self.suit_index) < (
            other.rank_index,
            other.suit_index,
        )


def _parse_rank(token: str, symbol: str) -> Rank:
    symbol = symbol.upper()
    if symbol in RANK_ALIASES:
        return RANK_ALIASES[symbol]
    try:
        return Rank(symbol)
    except ValueError:
        raise InvalidCard(token, f"unknown rank '{symbol}'") from None


def _parse_suit(token: str, symbol: str) -> Suit:
    if symbol.upper() in SUIT_ALIASES:
        return SUIT_ALIASES[symbol.upper()]
    try:
        return Suit(symbol)
    except ValueError:
        raise InvalidCard(token, f"unknown suit '{symbol}'") from None


def _as_card(card: Card | str) -> Card:
    if isinstance(card, Card):
        return card
    return Card.from_str(card)


def rank_value(card: Card | str) -> int:
    """Rank index of a card or card token, in [0, 12]."""
    return _as_card(card).rank_index


def suit_value(card: Card | str) -> int:
    """Suit index of a card or card token, in [0, 3]."""
    return _as_card(card).suit_index


def parse_cards(cards: str | Iterable[Card | str]) -> list[Card]:
    """Parse cards: 'A♠K♥', 'A♠ K♥', 'As,Kh' or an iterable of tokens/Cards.

    Supports both concatenated and space/comma separated formats.
    """
    if isinstance(cards, str):
        out: list[Card] = []
        for chunk in _SEPARATOR_RE.split(cards.strip()):
            pos = 0
            while pos < len(chunk):
                match = _TOKEN_RE.match(chunk, pos)
                if match is None:
                    raise InvalidCard(chunk)
                out.append(Card.from_str(match.group(0)))
                pos = match.end()
        return out
    return [_as_card(c) for c in cards]


def _build_deck() -> tuple[Card, ...]:
    return tuple(Card(rank=rank, suit=suit) for rank in Rank for suit in Suit)


# Built once at import; tuples and frozensets cannot be mutated afterwards.
FULL_DECK: tuple[Card, ...] = _build_deck()
_FULL_DECK_SET: frozenset[Card] = frozenset(FULL_DECK)


def full_deck() -> frozenset[Card]:
    """Return the 52-card universe."""
    return _FULL_DECK_SET


def available(seen: Iterable[Card]) -> list[Card]:
    """Return the cards not in ``seen``, in canonical deck order."""
    dead = set(seen)
    return [c for c in FULL_DECK if c not in dead]


class Deck:
    """The unseen-card pool for a single rollout.

    A new Deck is built from the universe for every rollout, so nothing
    dealt in one rollout leaks into the next.
    """

    def __init__(
        self,
        seen: Iterable[Card] = (),
        rng: np.random.Generator | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()
        self._cards: list[Card] = available(seen)

    def shuffle(self) -> None:
        """Shuffle the remaining cards; every permutation is equally likely."""
        self._rng.shuffle(self._cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck.

        Args:
            n: Number of cards to deal.

        Returns:
            List of dealt cards.

        Raises:
            ValueError: If n is negative.
            InsufficientDeck: If not enough cards remain.
        """
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self._cards):
            raise InsufficientDeck(needed=n, remaining=len(self._cards))
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
