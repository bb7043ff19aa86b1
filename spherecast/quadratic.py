"""Solving linear and quadratic equations a*x^2 + b*x + c = 0."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import TextIO

EPSILON = 1e-6

_COEFFICIENTS_PROMPT = (
    "Enter the coefficients of the quadratic equation"
    ' a*x^2 + b*x + c = 0 in order "a b c", separated by spaces: '
)


class RootCase(enum.Enum):
    """How many roots an equation has."""

    INF_ROOTS = 3
    NO_ROOTS = 4
    ONE_ROOT = 5
    TWO_ROOTS = 6
    NOT_STATED = 7


@dataclass(frozen=True)
class Solution:
    """The outcome of solving an equation; unused roots are NaN."""

    case: RootCase = RootCase.NOT_STATED
    root1: float = math.nan
    root2: float = math.nan


def _is_equal(first: float, second: float) -> bool:
    return abs(first - second) <= EPSILON


def _zero_fix(value: float) -> float:
    """Turn values that are practically zero (including -0.0) into their absolute value."""
    return abs(value) if _is_equal(value, 0) else value


def solve_linear(b: float, c: float) -> Solution:
    """Solve b*x + c = 0."""
    if _is_equal(c, 0) and _is_equal(b, 0):
        return Solution(RootCase.INF_ROOTS)
    if _is_equal(b, 0):
        return Solution(RootCase.NO_ROOTS)
    return Solution(RootCase.ONE_ROOT, _zero_fix(-c / b))


def solve_quadratic(a: float, b: float, c: float) -> Solution:
    """Solve a*x^2 + b*x + c = 0 for a non-zero ``a``."""
    discr = b * b - 4 * a * c
    if _is_equal(discr, 0):
        return Solution(RootCase.ONE_ROOT, _zero_fix(-b / (2 * a)))
    if discr > 0:
        discr_sqrt = math.sqrt(discr)
        double_a = 2 * a
        return Solution(
            RootCase.TWO_ROOTS,
            (-b - discr_sqrt) / double_a,
            (-b + discr_sqrt) / double_a,
        )
    return Solution(RootCase.NO_ROOTS)


def solve_equation(a: float, b: float, c: float) -> Solution:
    """Solve the equation, falling back to the linear case when ``a`` is zero."""
    if _is_equal(a, 0):
        return solve_linear(b, c)
    return solve_quadratic(a, b, c)


def format_args(a: float, b: float, c: float) -> str:
    """Describe the coefficients; they must all be finite."""
    if not all(math.isfinite(value) for value in (a, b, c)):
        raise ValueError("coefficients must be finite numbers")
    return "a = %g  b = %g  c = %g" % (a, b, c)


def format_result(a: float, solution: Solution) -> str:
    """Describe the solution in a sentence."""
    match solution.case:
        case RootCase.INF_ROOTS:
            return "Linear equation has infinite amount of roots."
        case RootCase.ONE_ROOT:
            kind = "Linear" if _is_equal(a, 0) else "Quadratic"
            return "%s equation has one root: %g." % (kind, solution.root1)
        case RootCase.TWO_ROOTS:
            return "Quadratic equation has two root: %g and %g." % (
                solution.root1,
                solution.root2,
            )
        case RootCase.NO_ROOTS:
            return "Equation has no roots."
        case _:
            return "Unexpected amount of roots."


def _parse_coefficients(line: str) -> tuple[float, float, float] | None:
    tokens = line.split()
    if len(tokens) < 3:
        return None
    try:
        a, b, c = (float(token) for token in tokens[:3])
    except ValueError:
        return None
    return a, b, c


def read_coefficients(stdin: TextIO, stdout: TextIO) -> tuple[float, float, float]:
    """Prompt until a line with three numbers is entered and return them."""
    while True:
        stdout.write(_COEFFICIENTS_PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before coefficients were entered")
        parsed = _parse_coefficients(line)
        if parsed is not None:
            return parsed
        stdout.write("ERROR on input, try again.\n")


def ask_repeat(stdin: TextIO, stdout: TextIO) -> bool:
    """Ask whether to solve another equation; True for yes, False for no."""
    while True:
        stdout.write("Do you want to repeat? 1.YES or 2.NO\n")
        stdout.write("Your answer is: ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError("input ended before an answer was given")
        tokens = line.split()
        answer = None
        if tokens:
            try:
                answer = int(tokens[0])
            except ValueError:
                answer = None
        if answer == 1:
            return True
        if answer == 2:
            return False
        stdout.write("Try again\n")
        stdout.write("Please enter 1 to repeat or 2 to stop.\n")