"""
This module defines the backtracking solver and the context object that
collects the results of a solver run.

The solver is brute force with a little help: before each guess, the digits
of the givens are eliminated from their peers (see reducer.py), and the
square to guess on is the one with the fewest candidates left. Every guess is
made on a copy of the grid, so backing out of a bad guess is just a matter
of dropping the copy.
"""

import logging
from time import time

from .data import COUNTS, DIGITS, DIGIT_BITS
from .reducer import reduce, reduce_square

log = logging.getLogger(__name__)

class SolveContext:
    """Collects what happened during one top level call to Solver.solve.
    Don't reuse a context for a second puzzle.

    The solutions list holds every complete grid found, in the order they
    were found. unique_solution is the first solution as long as it's the
    only one; the moment a second solution turns up it goes back to None
    for good.
    """
    def __init__(self):
        self.solutions = []
        self.unique_solution = None
        self.search_call_count = 0
        self.start_time = None
        self.end_time = None
        self.problem = None

    def add_solution(self, grid):
        if not self.solutions:
            self.unique_solution = grid
        else:
            self.unique_solution = None
        self.solutions.append(grid)

    @property
    def calculation_time(self):
        """Milliseconds spent in the solver."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def elapsed(self):
        """Seconds since the solver started."""
        return time() - self.start_time

def is_solution(grid):
    """True if every square is solved and the givens don't contradict each
    other. A single reduce pass doesn't propagate everything, so a grid can
    end up complete with a conflict in it; reducing it once more catches that.
    """
    if not all(COUNTS[mask] == 1 for mask in grid.cells):
        return False
    return reduce(grid) is not None

def generate_moves(grid):
    """Pick the square with the smallest number of candidates (at least two;
    the first one found wins a tie) and make a copy of the grid for each of
    its candidates, lowest digit first. Copies that turn out inconsistent are
    dropped. Returns an empty list if there is no square left to guess on.
    """
    cells = grid.cells
    square = None
    smallest = 10
    for s, mask in enumerate(cells):
        count = COUNTS[mask]
        if 2 <= count < smallest:
            square = s
            smallest = count
            if count == 2:
                break

    moves = []
    if square is None:
        return moves
    for digit in DIGITS[cells[square]]:
        move = grid.copy()
        move.cells[square] = DIGIT_BITS[digit - 1]
        if reduce_square(square, move):
            moves.append(move)
    return moves

class Solver:
    """Depth first search over candidate grids.

    >>> context = SolveContext()
    >>> Solver().solve(grid, context)
    >>> context.unique_solution is not None
    True

    With exit_at_first, the search stops once it has found a solution; the
    context still reports it as unique, since nothing else was looked at.
    max_time is a budget in seconds, measured from the start of the solve.
    It's checked between sibling guesses, so an overrun winds down instead of
    stopping dead.
    """
    def solve(self, grid, context, exit_at_first=False, max_time=None):
        context.start_time = time()
        context.problem = grid
        self.context = context
        self.exit_at_first = exit_at_first
        self.max_time = max_time

        reduced = reduce(grid)
        if reduced is not None:
            self.search(reduced)

        context.end_time = time()
        log.debug(
            'Solve finished in %.0f ms: %d solution(s), %d search calls',
            context.calculation_time, len(context.solutions),
            context.search_call_count
        )
        return context

    def search(self, grid):
        context = self.context
        context.search_call_count += 1

        if is_solution(grid):
            context.add_solution(grid)
            return

        for move in generate_moves(grid):
            self.search(move)
            if self.exit_at_first and context.unique_solution is not None:
                break
            if self.max_time_exceeded():
                break

    def max_time_exceeded(self):
        if self.max_time is None:
            return False
        return self.context.elapsed() > self.max_time

def solve(grid, exit_at_first=False, max_time=None):
    """Shortcut to run a Solver on a grid with a fresh context."""
    return Solver().solve(grid, SolveContext(), exit_at_first, max_time)
