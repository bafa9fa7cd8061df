import pytest

from advent.year2023_day02 import Game, Round, main, minimal_power, parse_game

LINE = "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green"


def test_parse_game_reads_id_and_rounds():
    game = parse_game(LINE)
    assert game.id == 1
    assert game.rounds[0] == Round(red=4, blue=3)
    assert game.rounds[2] == Round(green=2)
    assert len(game.rounds) == LINE.count(";") + 1


def test_example_power():
    assert minimal_power(parse_game(LINE)) == 48


def test_single_round_power_is_product():
    game = Game(7, (Round(red=2, green=3, blue=5),))
    assert minimal_power(game) == 2 * 3 * 5


def test_missing_colour_gives_zero_power():
    assert minimal_power(parse_game("Game 3: 5 red; 2 green")) == 0


def test_power_uses_maximum_per_colour():
    many = parse_game("Game 2: 1 red, 1 green, 1 blue; 4 red, 1 green, 1 blue")
    assert minimal_power(many) == minimal_power(parse_game("Game 2: 4 red, 1 green, 1 blue"))


@pytest.mark.parametrize("line", ["Game x: 1 red", "1 red, 2 blue", "Game 1: 3 purple"])
def test_malformed_lines_raise(line):
    with pytest.raises(ValueError):
        parse_game(line)


def test_main_prints_power_sum(tmp_path, capsys):
    other = "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red"
    path = tmp_path / "input.txt"
    path.write_text(f"{LINE}\n{other}\n")
    main([str(path)])
    expected = minimal_power(parse_game(LINE)) + minimal_power(parse_game(other))
    assert capsys.readouterr().out == f"{expected}\n"