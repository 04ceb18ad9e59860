# tests/conftest.py
import random

import pytest

from sudoku.util import string_to_grid

# A hard puzzle with a known unique solution; 24 givens.
KNOWN_PUZZLE = (
    "81.......\n"
    "..36.....\n"
    ".7..9.2..\n"
    ".5...7...\n"
    "3...457..\n"
    "...1...3.\n"
    "..1....68\n"
    "..85...1.\n"
    ".9....4.2\n"
)

KNOWN_SOLUTION = (
    "812753649\n"
    "943682175\n"
    "675491283\n"
    "154237896\n"
    "369845721\n"
    "287169534\n"
    "521974368\n"
    "438526917\n"
    "796318452\n"
)

# KNOWN_SOLUTION with a deadly rectangle opened up: squares (0,2), (0,5),
# (1,2), (1,5) can hold 2/3 or 3/2, so there are exactly two solutions.
TWO_SOLUTIONS = (
    "81.75.649\n"
    "94.68.175\n"
    "675491283\n"
    "154237896\n"
    "369845721\n"
    "287169534\n"
    "521974368\n"
    "438526917\n"
    "796318452\n"
)

EMPTY = ".........\n" * 9

def is_valid_solution(grid):
    """Every row, column, and block is a permutation of 1-9."""
    values = [grid.value(s) for s in range(81)]
    if None in values:
        return False
    houses = []
    for n in range(9):
        houses.append([values[n * 9 + j] for j in range(9)])
        houses.append([values[i * 9 + n] for i in range(9)])
        r0, c0 = 3 * (n // 3), 3 * (n % 3)
        houses.append([values[(r0 + i) * 9 + c0 + j]
                       for i in range(3) for j in range(3)])
    return all(sorted(house) == list(range(1, 10)) for house in houses)

@pytest.fixture
def known_puzzle():
    return string_to_grid(KNOWN_PUZZLE)

@pytest.fixture
def known_solution():
    return string_to_grid(KNOWN_SOLUTION)

@pytest.fixture
def rng():
    return random.Random(1234)
