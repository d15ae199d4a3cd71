"""Tests for the hand evaluator."""

import random

import pytest

from holdem_mcts.core.hand_evaluator import HandEvaluator, HandResult, straight_high
from holdem_mcts.utils.card import FULL_DECK, Card
from holdem_mcts.utils.constants import HandRanking


def _cards(s: str) -> list[Card]:
    """Helper: parse space-separated card strings like 'Ah Kh Qh Jh Th'."""
    return [Card.from_str(c) for c in s.split()]


def _key(s: str) -> tuple[int, ...]:
    return HandEvaluator.evaluate(_cards(s)).key


class TestHandRankings:
    def test_royal_flush(self) -> None:
        result = HandEvaluator.evaluate(_cards("Ah Kh Qh Jh Th"))
        assert result.ranking == HandRanking.ROYAL_FLUSH
        assert result.key == (9,)

    def test_straight_flush(self) -> None:
        assert _key("9s 8s 7s 6s 5s") == (8, 7)

    def test_straight_flush_wheel(self) -> None:
        assert _key("5d 4d 3d 2d Ad") == (8, 3)

    def test_four_of_a_kind(self) -> None:
        assert _key("Ks Kh Kd Kc 3s") == (7, 11, 1)

    def test_full_house(self) -> None:
        assert _key("Jh Jd Jc 8s 8h") == (6, 9, 6)

    def test_flush(self) -> None:
        assert _key("Ah Th 7h 4h 2h") == (5, 12, 8, 5, 2, 0)

    def test_straight(self) -> None:
        assert _key("9h 8s 7d 6c 5h") == (4, 7)

    def test_straight_wheel(self) -> None:
        assert _key("5h 4s 3d 2c Ah") == (4, 3)

    def test_three_of_a_kind(self) -> None:
        assert _key("Qs Qh Qd 7c 3s") == (3, 10, 5, 1)

    def test_two_pair(self) -> None:
        assert _key("As Ah 8d 8c 4s") == (2, 12, 6, 2)

    def test_one_pair(self) -> None:
        assert _key("Ts Th 9d 5c 2s") == (1, 8, 7, 3, 0)

    def test_high_card(self) -> None:
        assert _key("Ah Ks 9d 5c 2h") == (0, 12, 11, 7, 3, 0)

    def test_ten_token_forms_are_equivalent(self) -> None:
        assert _key("10♥ J♥ Q♥ K♥ A♥") == _key("Th Jh Qh Kh Ah")


class TestStraightDetection:
    def test_standard_straight(self) -> None:
        # 7-8-9-10-J
        assert straight_high([5, 6, 7, 8, 9]) == 9

    def test_wheel(self) -> None:
        assert straight_high([12, 0, 1, 2, 3]) == 3

    def test_non_consecutive_is_not_straight(self) -> None:
        # 2-3-4-5-7
        assert straight_high([0, 1, 2, 3, 5]) is None

    def test_six_high_beats_wheel(self) -> None:
        assert straight_high([12, 0, 1, 2, 3, 4]) == 4

    def test_no_wraparound_through_ace(self) -> None:
        # K-A-2-3-4 is not a straight
        assert straight_high([11, 12, 0, 1, 2]) is None

    def test_longest_run_reports_highest_top(self) -> None:
        assert straight_high([3, 4, 5, 6, 7, 8, 9]) == 9

    def test_duplicates_ignored(self) -> None:
        assert straight_high([5, 5, 6, 7, 7, 8, 9]) == 9


class TestSevenCardEvaluation:
    def test_best_five_from_seven(self) -> None:
        # Hole cards: Ah Kh, Board: Qh Jh Th 3c 2d
        result = HandEvaluator.evaluate(_cards("Ah Kh Qh Jh Th 3c 2d"))
        assert result.ranking == HandRanking.ROYAL_FLUSH

    def test_straight_flush_priority_over_flush_and_straight(self) -> None:
        result = HandEvaluator.evaluate(_cards("9h 8h 7h 6h 5h Kh 2c"))
        assert result.key == (8, 7)

    def test_flush_and_straight_in_different_suits_is_flush(self) -> None:
        # Hearts 9 8 7 5 2 make a flush; 9-8-7-6-5 straight is off-suit
        result = HandEvaluator.evaluate(_cards("9h 8h 7h 6c 5h 2h Ks"))
        assert result.ranking == HandRanking.FLUSH
        assert result.key == (5, 7, 6, 5, 3, 0)

    def test_flush_keeps_top_five_of_six(self) -> None:
        assert _key("Ah 9h 7h 4h 2h 3h Ks") == (5, 12, 7, 5, 2, 1)

    def test_picks_flush_over_pair(self) -> None:
        result = HandEvaluator.evaluate(_cards("Ah 9h 7h 4h 2h Ks Kd"))
        assert result.ranking == HandRanking.FLUSH

    def test_picks_full_house_from_board(self) -> None:
        assert _key("Js Jh Jd 8s 8h 3c 2d") == (6, 9, 6)

    def test_two_triples_make_full_house(self) -> None:
        assert _key("Ks Kh Kd 7s 7h 7d 2c") == (6, 11, 5)

    def test_triple_with_two_pairs_uses_higher_pair(self) -> None:
        assert _key("Qs Qh Qd 9s 9h 5s 5h") == (6, 10, 7)

    def test_three_pairs_third_pair_is_kicker(self) -> None:
        assert _key("As Ah Ks Kh Qs Qh 2c") == (2, 12, 11, 10)

    def test_quads_kicker_from_trips(self) -> None:
        assert _key("7s 7h 7d 7c Ks Kh Kd") == (7, 5, 11)

    def test_flush_beats_trips_on_same_cards(self) -> None:
        assert _key("Ah Kh 8h 4h 2h As Ad") == (5, 12, 11, 6, 2, 0)

    def test_full_house_beats_flush_on_same_cards(self) -> None:
        # Eight cards: seven cannot hold both a flush and a full house
        result = HandEvaluator.evaluate(_cards("Ah Kh 8h 4h 2h As Ad Ks"))
        assert result.key == (6, 12, 11)

    def test_too_few_cards_raises(self) -> None:
        with pytest.raises(ValueError, match="Need at least 5 cards"):
            HandEvaluator.evaluate(_cards("Ah Kh Qh"))


class TestHandComparison:
    def test_category_order(self) -> None:
        hands = [
            "Ah Ks 9d 5c 2h",
            "Ts Th 9d 5c 2s",
            "As Ah 8d 8c 4s",
            "Qs Qh Qd 7c 3s",
            "9h 8s 7d 6c 5h",
            "Ah Th 7h 4h 2h",
            "Jh Jd Jc 8s 8h",
            "Ks Kh Kd Kc 3s",
            "9s 8s 7s 6s 5s",
            "Ah Kh Qh Jh Th",
        ]
        results = [HandEvaluator.evaluate(_cards(h)) for h in hands]
        assert results == sorted(results)
        assert [int(r.ranking) for r in results] == list(range(10))

    def test_higher_pair_wins(self) -> None:
        aces = HandEvaluator.evaluate(_cards("As Ah Kd 7c 3s"))
        kings = HandEvaluator.evaluate(_cards("Ks Kh Ad 7c 3s"))
        assert aces > kings

    def test_kicker_decides_pair(self) -> None:
        high_kicker = HandEvaluator.evaluate(_cards("As Ah Kd 7c 3s"))
        low_kicker = HandEvaluator.evaluate(_cards("As Ah Qd 7c 3s"))
        assert high_kicker > low_kicker

    def test_wheel_is_lowest_straight(self) -> None:
        wheel = HandEvaluator.evaluate(_cards("5h 4s 3d 2c Ah"))
        six_high = HandEvaluator.evaluate(_cards("6h 5s 4d 3c 2h"))
        assert six_high > wheel

    def test_equal_hands(self) -> None:
        hand1 = HandEvaluator.evaluate(_cards("As Kh Qd Jc 9s"))
        hand2 = HandEvaluator.evaluate(_cards("Ah Ks Qc Jd 9h"))
        assert hand1 == hand2
        assert hash(hand1) == hash(hand2)

    def test_shorter_key_loses_exact_prefix_tie(self) -> None:
        short = HandResult(HandRanking.STRAIGHT_FLUSH, ())
        longer = HandResult(HandRanking.STRAIGHT_FLUSH, (3,))
        assert short < longer

    def test_compare_royal_beats_broadway(self) -> None:
        board = _cards("Qs Js Ts 2d 3c")
        assert HandEvaluator.compare(_cards("As Ks"), _cards("Ah Kh"), board) == 1

    def test_compare_board_plays_is_tie(self) -> None:
        board = _cards("As Ks Qs Js Ts")
        assert HandEvaluator.compare(_cards("2h 3h"), _cards("4d 5d"), board) == 0


class TestRandomizedProperties:
    def test_category_in_range(self) -> None:
        rng = random.Random(11)
        for _ in range(500):
            result = HandEvaluator.evaluate(rng.sample(FULL_DECK, 7))
            assert 0 <= result.ranking <= 9
            assert result.key[0] == int(result.ranking)

    def test_compare_is_antisymmetric(self) -> None:
        rng = random.Random(5)
        for _ in range(300):
            cards = rng.sample(FULL_DECK, 9)
            a, b, board = cards[:2], cards[2:4], cards[4:]
            assert HandEvaluator.compare(a, b, board) == -HandEvaluator.compare(
                b, a, board
            )

    def test_evaluation_ignores_card_order(self) -> None:
        rng = random.Random(9)
        for _ in range(100):
            cards = rng.sample(FULL_DECK, 7)
            shuffled = list(cards)
            rng.shuffle(shuffled)
            assert HandEvaluator.evaluate(cards) == HandEvaluator.evaluate(shuffled)
