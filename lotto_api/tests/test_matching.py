import unittest

from lotto_api.services.draws import build_draw
from lotto_api.services.matching import (
    FIRST_PRIZE,
    FIRST_THREE_PRIZE,
    LAST_THREE_PRIZE,
    LAST_TWO_PRIZE,
    RUNNING_NUMBER_PRIZE,
    TIER_FIRST_PRIZE,
    TIER_FIRST_THREE,
    TIER_LAST_THREE,
    TIER_LAST_TWO,
    TIER_RUNNING_NUMBER,
    match_ticket,
    split_winning_number,
)


class PrizeMatchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.draw = build_draw("2024-03-16", "123456")

    def test_cached_digits(self) -> None:
        self.assertEqual(split_winning_number("123456"), ("123", "456", "56"))
        self.assertEqual(self.draw.first_three_digits, "123")
        self.assertEqual(self.draw.last_three_digits, "456")
        self.assertEqual(self.draw.last_two_digits, "56")

    def test_exact_match_wins_first_prize(self) -> None:
        result = match_ticket("123456", self.draw)
        self.assertEqual((result.status, result.prize_amount), ("won", 6_000_000))
        self.assertEqual(result.tier, TIER_FIRST_PRIZE)

    def test_last_three_digits(self) -> None:
        result = match_ticket("999456", self.draw)
        self.assertEqual((result.status, result.prize_amount), ("won", LAST_THREE_PRIZE))
        self.assertEqual(result.tier, TIER_LAST_THREE)

    def test_last_two_digits(self) -> None:
        result = match_ticket("000056", self.draw)
        self.assertEqual((result.status, result.prize_amount), ("won", LAST_TWO_PRIZE))
        self.assertEqual(result.tier, TIER_LAST_TWO)

    def test_last_two_checked_before_first_three(self) -> None:
        result = match_ticket("123756", self.draw)
        self.assertEqual(result.prize_amount, LAST_TWO_PRIZE)
        self.assertEqual(result.tier, TIER_LAST_TWO)

    def test_first_three_digits(self) -> None:
        result = match_ticket("123000", self.draw)
        self.assertEqual((result.status, result.prize_amount), ("won", FIRST_THREE_PRIZE))
        self.assertEqual(result.tier, TIER_FIRST_THREE)

    def test_first_three_checked_before_running_number(self) -> None:
        draw = build_draw("2024-03-16", "000001")
        result = match_ticket("000000", draw)
        self.assertEqual((result.status, result.prize_amount), ("won", 4_000))
        self.assertEqual(result.tier, TIER_FIRST_THREE)

    def test_running_number_across_thousand_boundary(self) -> None:
        draw = build_draw("2024-03-16", "123999")
        above = match_ticket("124000", draw)
        self.assertEqual((above.status, above.prize_amount), ("won", RUNNING_NUMBER_PRIZE))
        self.assertEqual(above.tier, TIER_RUNNING_NUMBER)

        draw = build_draw("2024-03-16", "124000")
        below = match_ticket("123999", draw)
        self.assertEqual(below.prize_amount, RUNNING_NUMBER_PRIZE)

    def test_no_wraparound_between_extremes(self) -> None:
        draw = build_draw("2024-03-16", "000000")
        result = match_ticket("999999", draw)
        self.assertEqual((result.status, result.prize_amount), ("lost", 0))
        self.assertIsNone(result.tier)

    def test_lost(self) -> None:
        result = match_ticket("654321", self.draw)
        self.assertEqual((result.status, result.prize_amount), ("lost", 0))
        self.assertFalse(result.won)

    def test_prize_table(self) -> None:
        self.assertEqual(FIRST_PRIZE, 6_000_000)
        self.assertEqual(RUNNING_NUMBER_PRIZE, 100_000)

    def test_invalid_winning_number_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_draw("2024-03-16", "12345")


if __name__ == "__main__":
    unittest.main()
