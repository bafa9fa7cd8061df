import pytest

from advent.year2023_day07 import (
    Hand,
    HandType,
    card_strength,
    classify,
    main,
    parse_hands,
    total_winnings,
)

EXAMPLE = "32T3K 765\nT55J5 684\nKK677 28\nKTJJT 220\nQQQJA 483\n"


def test_example_winnings():
    assert total_winnings(parse_hands(EXAMPLE)) == 5905


def test_parse_hands():
    hands = parse_hands(EXAMPLE)
    assert hands[0] == Hand("32T3K", 765)
    assert len(hands) == len(EXAMPLE.splitlines())


@pytest.mark.parametrize(
    "cards, expected",
    [
        ("32T3K", HandType.ONE_PAIR),
        ("KK677", HandType.TWO_PAIR),
        ("T55J5", HandType.FOUR_OF_A_KIND),
        ("KTJJT", HandType.FOUR_OF_A_KIND),
        ("QQQJA", HandType.FOUR_OF_A_KIND),
        ("JJJJJ", HandType.FIVE_OF_A_KIND),
        ("2233J", HandType.FULL_HOUSE),
        ("23456", HandType.HIGH_CARD),
        ("2345J", HandType.ONE_PAIR),
        ("2234J", HandType.THREE_OF_A_KIND),
    ],
)
def test_classify(cards, expected):
    assert classify(cards) == expected


def test_joker_is_weakest_card():
    order = ["J", "2", "9", "T", "Q", "K", "A"]
    strengths = [card_strength(card) for card in order]
    assert strengths == sorted(strengths)
    assert len(set(strengths)) == len(order)


def test_single_hand_wins_its_bid():
    assert total_winnings([Hand("AKQT9", 37)]) == 37


def test_stronger_type_outranks_stronger_cards():
    weak, strong = Hand("AKQT9", 1), Hand("22345", 10)
    assert total_winnings([weak, strong]) == 1 * 1 + 2 * 10


def test_unknown_card_raises():
    with pytest.raises(ValueError):
        classify("2345X")


def test_main_prints_winnings(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out == f"{total_winnings(parse_hands(EXAMPLE))}\n"