import random
import re
import unittest

from lotto_api.services.numbers import generate_winning_number


class FixedRandom:
    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


class WinningNumberTests(unittest.TestCase):
    def test_zero_padded(self) -> None:
        self.assertEqual(generate_winning_number(FixedRandom(42)), "000042")
        self.assertEqual(generate_winning_number(FixedRandom(0)), "000000")
        self.assertEqual(generate_winning_number(FixedRandom(999999)), "999999")

    def test_samples_full_range(self) -> None:
        source = FixedRandom(7)
        generate_winning_number(source)
        self.assertEqual(source.calls, [(0, 999999)])

    def test_out_of_range_source_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate_winning_number(FixedRandom(1_000_000))

    def test_seeded_source_is_deterministic(self) -> None:
        first = generate_winning_number(random.Random(2024))
        second = generate_winning_number(random.Random(2024))
        self.assertEqual(first, second)

    def test_default_source_shape(self) -> None:
        for _ in range(100):
            self.assertRegex(generate_winning_number(), re.compile(r"^[0-9]{6}$"))


if __name__ == "__main__":
    unittest.main()
