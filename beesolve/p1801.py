"""Solutions for problems numbered 1801 to 2200."""

from collections import Counter

POKEMON_TOTAL = 151

_BEATS = {
    "tesoura": {"papel", "lagarto"},
    "papel": {"pedra", "spock"},
    "pedra": {"lagarto", "tesoura"},
    "lagarto": {"papel", "spock"},
    "spock": {"pedra", "tesoura"},
}

# Shooter colour -> (keeper colour worth one point, team name).
_SHOOTERS = {
    "R": ("B", "red"),
    "G": ("R", "green"),
    "B": ("G", "blue"),
}

_RANKS = (1, 3, 5, 10, 25, 50, 100)


def cheapest_position(prices):
    """Return the 1-based position of the first lowest price."""
    prices = list(prices)
    if not prices:
        raise ValueError("at least one price is needed")
    return min(range(len(prices)), key=prices.__getitem__) + 1


def rpsls_winner(rajesh, sheldon):
    """Return 'empate', 'rajesh' or 'sheldon' for one round."""
    if rajesh == sheldon:
        return "empate"
    if sheldon in _BEATS.get(rajesh, ()):
        return "rajesh"
    return "sheldon"


def goal_winner(goals):
    """Score (shooter, keeper) colour pairs and name the winning team."""
    scores = {"red": 0, "green": 0, "blue": 0}
    for shooter, keeper in goals:
        if shooter not in _SHOOTERS:
            continue
        easy_keeper, team = _SHOOTERS[shooter]
        scores[team] += 1 if keeper == easy_keeper else 2

    best = max(scores.values())
    leaders = [team for team, score in scores.items() if score == best]
    if len(leaders) == len(scores):
        return "trempate"
    if len(leaders) > 1:
        return "empate"
    return leaders[0]


def top_rank(k):
    """Return the 'Top N' bracket for position k, or None beyond 100."""
    if k == 1:
        return "Top 1"
    for rank in _RANKS[1:]:
        if k <= rank:
            return f"Top {rank}"
    return None


def lonely_numbers(values):
    """Return, sorted, the values that appear an odd number of times."""
    return sorted(value for value, count in Counter(values).items() if count % 2)


def missing_pokemon(names):
    """Return how many of the 151 pokemon are still missing."""
    return POKEMON_TOTAL - len(set(names))