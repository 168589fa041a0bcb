"""Command-line judge runner: feed problem input, get the expected output."""

import argparse
import sys

from beesolve import p1001, p1201, p1401, p1801, p2201, p2801
from beesolve.scanner import Scanner

_HANDLERS = {}


def _problem(number):
    def register(handler):
        _HANDLERS[number] = handler
        return handler

    return register


@_problem(1029)
def _fib(scanner):
    for _ in range(scanner.int()):
        x = scanner.int()
        result = p1001.fib_calls(x)
        yield f"fib({x}) = {result.calls} calls = {result.value}"


@_problem(1047)
def _game_time(scanner):
    hours, minutes = p1001.game_duration(*scanner.ints(4))
    yield f"O JOGO DUROU {hours} HORA(S) E {minutes} MINUTO(S)"


@_problem(1069)
def _diamonds(scanner):
    for _ in range(scanner.int()):
        yield str(p1001.count_diamonds(scanner.word()))


@_problem(1075)
def _remainder(scanner):
    yield from map(str, p1001.remainder_sequence(scanner.int()))


@_problem(1089)
def _peaks(scanner):
    n = scanner.int()
    while n:
        yield str(p1001.count_peaks(scanner.ints(n)))
        n = scanner.int()


@_problem(1103)
def _alarm(scanner):
    times = scanner.ints(4)
    while any(times):
        yield str(p1001.minutes_until(*times))
        times = scanner.ints(4)


@_problem(1136)
def _bingo(scanner):
    n, m = scanner.ints(2)
    while n:
        yield "Y" if p1001.can_call_all(n, scanner.ints(m)) else "N"
        n, m = scanner.ints(2)


@_problem(1170)
def _blobs(scanner):
    for _ in range(scanner.int()):
        yield f"{p1001.days_to_consume(scanner.float())} dias"


@_problem(1171)
def _frequency(scanner):
    numbers = scanner.ints(scanner.int())
    for number, count in p1001.count_occurrences(numbers):
        yield f"{number} aparece {count} vez(es)"


@_problem(1212)
def _carries(scanner):
    a, b = scanner.ints(2)
    while a or b:
        carries = p1201.count_carries(a, b)
        if carries == 0:
            yield "No carry operation."
        elif carries == 1:
            yield "1 carry operation."
        else:
            yield f"{carries} carry operations."
        a, b = scanner.ints(2)


@_problem(1215)
def _dictionary(scanner):
    yield from p1201.dictionary_words(scanner.lines())


@_problem(1221)
def _primes(scanner):
    for _ in range(scanner.int()):
        yield "Prime" if p1201.is_prime(scanner.int()) else "Not Prime"


@_problem(1244)
def _by_length(scanner):
    n = scanner.int()
    for line in scanner.lines()[:n]:
        yield " ".join(p1201.sort_by_length(line.split()))


@_problem(1245)
def _boots(scanner):
    while scanner.has_more():
        n = scanner.int()
        boots = [(scanner.int(), scanner.word()) for _ in range(n)]
        yield str(p1201.count_matched_pairs(boots))


@_problem(1253)
def _caesar(scanner):
    for _ in range(scanner.int()):
        text = scanner.word()
        yield p1201.caesar_decode(text, scanner.int())


@_problem(1267)
def _alumni(scanner):
    n, d = scanner.ints(2)
    while n or d:
        rows = [scanner.ints(n) for _ in range(d)]
        yield "yes" if p1201.anyone_attended_all(rows) else "no"
        n, d = scanner.ints(2)


@_problem(1323)
def _squares(scanner):
    n = scanner.int()
    while n:
        yield str(p1201.count_squares(n))
        n = scanner.int()


@_problem(1329)
def _head_tail(scanner):
    n = scanner.int()
    while n:
        mary, john = p1201.head_tail_tally(scanner.ints(n))
        yield f"Mary won {mary} times and John won {john} times"
        n = scanner.int()


@_problem(1366)
def _frames(scanner):
    n = scanner.int()
    while n:
        sticks = [tuple(scanner.ints(2)) for _ in range(n)]
        yield str(p1201.count_frames(sticks))
        n = scanner.int()


@_problem(1397)
def _rounds(scanner):
    n = scanner.int()
    while n:
        rounds = [tuple(scanner.ints(2)) for _ in range(n)]
        first, second = p1201.score_rounds(rounds)
        yield f"{first} {second}"
        n = scanner.int()


@_problem(1436)
def _ages(scanner):
    for case in range(1, scanner.int() + 1):
        ages = scanner.ints(scanner.int())
        yield f"Case {case}: {p1401.middle_age(ages)}"


@_problem(1467)
def _odd(scanner):
    while scanner.has_more():
        result = p1401.odd_one_out(*scanner.ints(3))
        if result is not None:
            yield result


def _score(scanner):
    home = scanner.int()
    scanner.word()
    return home, scanner.int()


@_problem(1536)
def _libertadores(scanner):
    for _ in range(scanner.int()):
        first = _score(scanner)
        yield p1401.libertadores_winner(first, _score(scanner))


@_problem(1608)
def _cakes(scanner):
    for _ in range(scanner.int()):
        money, ingredients, recipe_count = scanner.ints(3)
        prices = scanner.ints(ingredients)
        recipes = [
            [tuple(scanner.ints(2)) for _ in range(scanner.int())]
            for _ in range(recipe_count)
        ]
        yield str(p1401.max_cakes(money, prices, recipes))


@_problem(1858)
def _cheapest(scanner):
    yield str(p1801.cheapest_position(scanner.ints(scanner.int())))


@_problem(1873)
def _rpsls(scanner):
    for _ in range(scanner.int()):
        rajesh = scanner.word()
        yield p1801.rpsls_winner(rajesh, scanner.word())


@_problem(1875)
def _goals(scanner):
    for _ in range(scanner.int()):
        goals = [(scanner.word(), scanner.word()) for _ in range(scanner.int())]
        yield p1801.goal_winner(goals)


@_problem(1943)
def _top(scanner):
    rank = p1801.top_rank(scanner.int())
    if rank is not None:
        yield rank


@_problem(2091)
def _lonely(scanner):
    n = scanner.int()
    while n:
        yield from map(str, p1801.lonely_numbers(scanner.ints(n)))
        n = scanner.int()


@_problem(2174)
def _pokemon(scanner):
    names = [scanner.word() for _ in range(scanner.int())]
    yield f"Falta(m) {p1801.missing_pokemon(names)} pomekon(s)."


@_problem(2232)
def _pascal(scanner):
    for _ in range(scanner.int()):
        yield str(p2201.pascal_sum(scanner.int()))


@_problem(2253)
def _passwords(scanner):
    for line in scanner.lines():
        yield "Senha valida." if p2201.is_valid_password(line) else "Senha invalida."


@_problem(2342)
def _overflow(scanner):
    limit = scanner.int()
    p = scanner.int()
    op = scanner.word()
    yield p2201.check_overflow(limit, p, op, scanner.int())


@_problem(2374)
def _pressure(scanner):
    yield str(p2201.pressure_difference(*scanner.ints(2)))


@_problem(2424)
def _box(scanner):
    yield "dentro" if p2201.inside_box(*scanner.ints(2)) else "fora"


@_problem(2460)
def _queue(scanner):
    queue = scanner.ints(scanner.int())
    leaving = scanner.ints(scanner.int())
    yield " ".join(map(str, p2201.remaining_queue(queue, leaving)))


@_problem(2653)
def _distinct(scanner):
    words = []
    while scanner.has_more():
        words.append(scanner.word())
    yield str(p2201.count_distinct(words))


@_problem(2846)
def _non_fib(scanner):
    yield str(p2801.nth_non_fibonacci(scanner.int()))


@_problem(2867)
def _digits(scanner):
    for _ in range(scanner.int()):
        yield str(p2801.digit_count(*scanner.ints(2)))


@_problem(3084)
def _clock(scanner):
    while scanner.has_more():
        yield p2801.clock_reading(*scanner.ints(2))


@_problem(3147)
def _middle_earth(scanner):
    if p2801.middle_earth_safe(*scanner.ints(6)):
        yield "Middle-earth is safe."
    else:
        yield "Sauron has returned."


@_problem(3250)
def _elevator(scanner):
    presses = p2801.elevator_presses(*scanner.ints(5))
    yield "use the stairs" if presses is None else str(presses)


@_problem(3299)
def _unlucky(scanner):
    text = scanner.word()
    if p2801.is_unlucky(text):
        yield f"{text} es de Mala Suerte"
    else:
        yield f"{text} NO es de Mala Suerte"


@_problem(3358)
def _easy(scanner):
    for _ in range(scanner.int()):
        word = scanner.word()
        yield f"{word} eh facil" if p2801.is_easy(word) else f"{word} nao eh facil"


def solve(problem, text):
    """Return the judge output for ``problem`` given its input text."""
    try:
        handler = _HANDLERS[int(problem)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unknown problem: {problem}") from exc
    return "".join(f"{line}\n" for line in handler(Scanner(text)))


def main(argv=None):
    """Run one problem over standard input or a file and print its output."""
    parser = argparse.ArgumentParser(
        prog="beesolve", description="Solve a judge problem from its input."
    )
    parser.add_argument("problem", type=int, help="problem number")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, '-' for standard input"
    )
    args = parser.parse_args(argv)

    if args.problem not in _HANDLERS:
        parser.error(f"unknown problem: {args.problem}")

    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        output = solve(args.problem, text)
    except EOFError:
        print("beesolve: input ended too early", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"beesolve: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0