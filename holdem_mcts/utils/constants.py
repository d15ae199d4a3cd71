"""Constants for the Stay/Fold decision engine."""

from enum import IntEnum, StrEnum


class Suit(StrEnum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"


class Rank(StrEnum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


# Rank index used by the evaluator: 2 -> 0 ... A -> 12
RANK_INDEX: dict[Rank, int] = {rank: i for i, rank in enumerate(Rank)}

SUIT_INDEX: dict[Suit, int] = {suit: i for i, suit in enumerate(Suit)}

# ASCII spellings accepted on input
RANK_ALIASES: dict[str, Rank] = {"T": Rank.TEN}

SUIT_ALIASES: dict[str, Suit] = {
    "S": Suit.SPADES,
    "H": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "C": Suit.CLUBS,
}

ACE = RANK_INDEX[Rank.ACE]

HOLE_CARDS = 2
BOARD_CARDS = 5


class HandRanking(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


class Decision(StrEnum):
    STAY = "Stay"
    FOLD = "Fold"


DEFAULT_TIME_BUDGET_MS = 10_000
DEFAULT_STAY_THRESHOLD = 0.5
