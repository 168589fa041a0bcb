# beesolve

Solutions to a set of classic online-judge exercises. Each problem has a plain
Python function that takes ready-made values and returns the answer. A
command-line tool reads a problem's input in the judge's format and prints the
expected output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the functions

The problems are grouped into modules by number range:

| Module            | Problems                                                          |
|-------------------|-------------------------------------------------------------------|
| `beesolve.p1001`  | 1029, 1047, 1069, 1075, 1089, 1103, 1136, 1170, 1171              |
| `beesolve.p1201`  | 1212, 1215, 1221, 1244, 1245, 1253, 1267, 1323, 1329, 1366, 1397  |
| `beesolve.p1401`  | 1436, 1467, 1536, 1608                                            |
| `beesolve.p1801`  | 1858, 1873, 1875, 1943, 2091, 2174                                |
| `beesolve.p2201`  | 2232, 2253, 2342, 2374, 2424, 2460, 2653                          |
| `beesolve.p2801`  | 2846, 2867, 3084, 3147, 3250, 3299, 3358                          |

```python
from beesolve.p1201 import is_prime, caesar_decode
from beesolve.p2201 import is_valid_password
from beesolve.p2801 import clock_reading

is_prime(97)                   # True
caesar_decode("VQREQFGT", 2)   # "TOPCODER"
is_valid_password("Abc123")    # True
clock_reading(90, 0)           # "03:00"
```

Functions raise `ValueError` for arguments outside the range they handle,
for example `p1001.fib_calls` for values beyond 39 or `p2201.pascal_sum`
for values beyond 31. Some return `None` where there is no answer to
print, such as `p1801.top_rank` past position 100 or
`p2801.elevator_presses` when the goal floor cannot be reached.

`beesolve.scanner.Scanner` reads judge-style input from front to back:
`word()`, `int()`, `float()` and `ints(count)` take whitespace-separated
tokens, `has_more()` tells whether any token is left, and `lines()` returns
the remaining lines. Reading past the end raises `EOFError`.

## Command line

Give the problem number, and optionally an input file (`-`, the default,
means standard input). The answer goes to standard output:

```
echo "3 5" | beesolve 2374
```

```
printf "2\n97\n100\n" | beesolve 1221
```

```
beesolve 1029 input.txt
```

An unknown problem number is rejected with a usage error. Input that ends
too early, or holds values the solution does not accept, gives a message on
standard error and exit status 1.

From Python, `beesolve.cli.solve(problem, text)` takes the problem number and
the input text and returns the output text; it raises `ValueError` for an
unknown problem.

## Limits

Only the problems listed above are covered. The tool solves one problem
per run from given input; it does not fetch problem statements, submit
answers or check output against a judge.