import itertools

import pytest

from beesolve.p1801 import (
    POKEMON_TOTAL,
    cheapest_position,
    goal_winner,
    lonely_numbers,
    missing_pokemon,
    rpsls_winner,
    top_rank,
)

_MOVES = ["tesoura", "papel", "pedra", "lagarto", "spock"]


def test_cheapest_position_single():
    assert cheapest_position([4]) == 1


@pytest.mark.parametrize("prices", [[5, 3, 3, 7], [1, 2, 3], [9, 8, 7], [2, 1, 2, 1]])
def test_cheapest_position_is_first_minimum(prices):
    position = cheapest_position(prices)
    assert prices[position - 1] == min(prices)
    assert all(price > min(prices) for price in prices[: position - 1])


def test_cheapest_position_empty():
    with pytest.raises(ValueError):
        cheapest_position([])


def test_rpsls_draw():
    assert rpsls_winner("spock", "spock") == "empate"


def test_rpsls_examples():
    assert rpsls_winner("tesoura", "papel") == "rajesh"
    assert rpsls_winner("papel", "tesoura") == "sheldon"


@pytest.mark.parametrize("first, second", list(itertools.combinations(_MOVES, 2)))
def test_rpsls_exactly_one_side_wins(first, second):
    results = {rpsls_winner(first, second), rpsls_winner(second, first)}
    assert results == {"rajesh", "sheldon"}


def test_rpsls_each_move_beats_two():
    for move in _MOVES:
        wins = [other for other in _MOVES if rpsls_winner(move, other) == "rajesh"]
        assert len(wins) == 2


def test_goal_winner_no_goals():
    assert goal_winner([]) == "trempate"


def test_goal_winner_single_team():
    assert goal_winner([("B", "G")]) == "blue"
    assert goal_winner([("G", "R")]) == "green"
    assert goal_winner([("R", "B")]) == "red"


def test_goal_winner_tie_at_top():
    assert goal_winner([("R", "G"), ("B", "R")]) == "empate"


def test_goal_winner_weighted_goal_beats_easy_goal():
    assert goal_winner([("R", "B"), ("G", "B")]) == "green"


@pytest.mark.parametrize("k, expected", [(1, "Top 1"), (2, "Top 3"), (100, "Top 100")])
def test_top_rank(k, expected):
    assert top_rank(k) == expected


def test_top_rank_beyond_hundred():
    assert top_rank(101) is None


def test_lonely_numbers():
    assert lonely_numbers([1, 2, 2, 3, 3, 3]) == [1, 3]


def test_lonely_numbers_pairs_vanish():
    assert lonely_numbers([7, 7, 9, 9]) == []


def test_missing_pokemon_none_caught():
    assert missing_pokemon([]) == POKEMON_TOTAL


def test_missing_pokemon_ignores_duplicates():
    assert missing_pokemon(["pikachu", "pikachu"]) == missing_pokemon(["pikachu"])
    assert missing_pokemon(["pikachu"]) == POKEMON_TOTAL - 1