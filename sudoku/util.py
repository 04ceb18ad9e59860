"""
Reading puzzles from text, and writing out the reports of the command line
tool.

The text format is nine lines of nine characters. The digits 1-9 are givens;
any other character is an open square. When writing, open squares come out
as '.'.
"""

import sys

from .config import SIZE
from .data import Grid
from .errors import ParseError

THIN_DIVIDER = '-' * 40
THICK_DIVIDER = '=' * 40

def string_to_grid(string):
    """Parse puzzle text into a Grid. Raises ParseError if the text isn't
    nine lines of exactly nine characters. Anything after the ninth line is
    ignored.
    """
    lines = string.splitlines()
    if len(lines) < SIZE:
        raise ParseError(
            'Expected {} lines, got {}'.format(SIZE, len(lines))
        )
    grid = Grid()
    for row, line in enumerate(lines[:SIZE]):
        if len(line) != SIZE:
            raise ParseError('Invalid input line: {!r}'.format(line))
        for col, c in enumerate(line):
            if c in '123456789':
                grid.set_digit((row, col), int(c))
    return grid

def grid_to_string(grid):
    return str(grid)

def read_grid(filepath):
    with open(filepath, encoding='utf-8') as file:
        return string_to_grid(file.read())

##
## Reports
##

def write_solution(filepath, context, grading=None, file=None):
    """Write the result of solving the puzzle in filepath."""
    if file is None:
        file = sys.stdout
    if context.unique_solution is not None:
        print('UNIQUE', file=file)
        file.write(str(context.unique_solution))
    elif not context.solutions:
        print('NO SOLUTION', file=file)
    else:
        print('NOT UNIQUE', file=file)
        file.write(str(context.solutions[0]))
        print('ALL SOLUTIONS', file=file)
        for solution in context.solutions:
            file.write(str(solution))
            print(THIN_DIVIDER, file=file)

    print(THICK_DIVIDER, file=file)
    print('Calculation time: {} ms'.format(round(context.calculation_time)),
          file=file)
    print('Search calls: {}'.format(context.search_call_count), file=file)
    print('Number of given: {}'.format(context.problem.given_count()),
          file=file)
    print('Input problem: {}'.format(filepath), file=file)
    file.write(str(context.problem))
    if grading is not None:
        print('Graded difficulty: {}'.format(grading.difficulty.label),
              file=file)
        print('Score - Number of given: {}'.format(grading.given_score),
              file=file)
        print('Score - Lower bound: {}'.format(grading.lower_bound_score),
              file=file)
        print('Score - Number of search calls: {}'.format(
            grading.search_calls_score), file=file)
        print('Weighted Score value: {}'.format(round(grading.score, 2)),
              file=file)
    print(THICK_DIVIDER, file=file)

def write_generation(result, file=None):
    """Write a generated puzzle, its solution, and how it was graded."""
    if file is None:
        file = sys.stdout
    file.write(str(result.problem))
    print(THICK_DIVIDER, file=file)
    print('Solution:', file=file)
    file.write(str(result.solution))
    print('Calculation time: {} ms'.format(round(result.calculation_time)),
          file=file)
    print('Targeted difficulty: {}'.format(result.targeted_difficulty.label),
          file=file)
    print('Graded difficulty: {}'.format(result.graded_difficulty.label),
          file=file)
    print('Number of given: {}'.format(result.given_count), file=file)
    print('Lower bound: {}'.format(result.lower_bound), file=file)
    print(THICK_DIVIDER, file=file)
