"""Solutions for problems numbered 1401 to 1800."""

NO_RECIPE_PRICE = 999999999


def middle_age(ages):
    """Return the age standing in the middle of the team's list."""
    ages = list(ages)
    if not ages:
        raise ValueError("at least one age is needed")
    return ages[len(ages) // 2]


def odd_one_out(a, b, c):
    """Return who differs: 'A', 'B', 'C', '*' for nobody, None if all differ."""
    if a == b == c:
        return "*"
    if a == b:
        return "C"
    if b == c:
        return "A"
    if a == c:
        return "B"
    return None


def libertadores_winner(first, second):
    """Decide a two-legged tie.

    ``first`` is (team 1 goals, team 2 goals) with team 1 at home, and
    ``second`` is (team 2 goals, team 1 goals) with team 2 at home.
    """
    home1, away2 = first
    home2, away1 = second
    points1 = points2 = 0
    if home1 > away2:
        points1 += 3
    if home1 < away2:
        points2 += 3
    if home2 > away1:
        points2 += 3
    if home2 < away1:
        points1 += 3

    if points1 != points2:
        return "Time 1" if points1 > points2 else "Time 2"

    total1 = home1 + away1
    total2 = home2 + away2
    if total1 != total2:
        return "Time 1" if total1 > total2 else "Time 2"
    if away1 == away2:
        return "Penaltis"
    return "Time 1" if away1 > away2 else "Time 2"


def max_cakes(money, prices, recipes):
    """Return how many cakes of the cheapest recipe the money buys.

    Each recipe is a sequence of (ingredient index, quantity) pairs.
    """
    cheapest = min(
        (
            sum(quantity * prices[index] for index, quantity in recipe)
            for recipe in recipes
        ),
        default=NO_RECIPE_PRICE,
    )
    if cheapest <= 0:
        raise ValueError("the cheapest recipe must cost something")
    return money // cheapest