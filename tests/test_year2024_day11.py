import pytest

from advent.year2024_day11 import blink, count_stones


def test_zero_becomes_one():
    assert blink(0) == [1]


def test_even_digits_split_in_half():
    assert blink(2024) == [20, 24]


def test_split_drops_leading_zeros():
    assert blink(1000) == [10, 0]


def test_odd_digits_multiply():
    assert blink(1) == [2024]


def test_example_six_blinks():
    assert count_stones([125, 17], 6) == 22


def test_example_twenty_five_blinks():
    assert count_stones([125, 17], 25) == 55312


def test_zero_blinks_keeps_stones():
    assert count_stones([5, 5, 7], 0) == len([5, 5, 7])


@pytest.mark.parametrize("blinks", [1, 5, 12])
def test_one_blink_then_rest_matches(blinks):
    stones = [125, 17, 0]
    expanded = [result for stone in stones for result in blink(stone)]
    assert count_stones(expanded, blinks - 1) == count_stones(stones, blinks)