"""
This module defines whatever for generating new sudoku puzzles
of varying difficulty.

Generating a puzzle goes in four steps:

1) Make a random terminal pattern (a solved grid). A handful of random givens
   is placed, and the solver finishes the grid. If the solver can't come up
   with a solution in time, we throw the givens away and try again.

2) Dig holes in the terminal pattern. Squares are visited in an order that
   depends on the difficulty, and each one is cleared if the puzzle still
   has enough givens and still has a unique solution afterwards. Squares
   are dug together with their mirror images, so the puzzles come out more
   or less symmetric.

3) Shuffle columns and rows around in ways that keep the grid valid, to
   hide any pattern the digging order left behind.

4) Solve the finished puzzle once more and grade it.
"""

import logging
import random
from collections import namedtuple
from time import time

from . import config
from .config import (Difficulty, SIZE, BLOCK_SIZE, SQUARE_COUNT, square_of,
                     row_col)
from .data import Grid
from .errors import Catastrophic, DifficultyError
from .grader import grade
from .reducer import reduce
from .solver import Solver, SolveContext

log = logging.getLogger(__name__)

GeneratorContext = namedtuple(
    'GeneratorContext',
    'problem solution targeted_difficulty graded_difficulty grading '
    'given_count lower_bound calculation_time'
)

def check_unique(grid):
    """Shortcut to run the solver on a grid and see if it has exactly one
    solution.
    """
    context = SolveContext()
    Solver().solve(grid, context)
    return context.unique_solution is not None

def symmetric_squares(square):
    """A square together with its three mirror images: reflected in the
    anti-diagonal, rotated half a turn around the center, and reflected in the
    main diagonal, in that order.
    """
    last = SIZE - 1
    row, col = row_col(square)
    return (square,
            square_of(last - col, last - row),
            square_of(last - row, last - col),
            square_of(col, row))

def permute_cols_and_rows(grid, perm):
    """Shuffle the columns inside each band of three, and then the rows inside
    each stack of three, both with the same permutation of (0, 1, 2).
    """
    source = lambda n: BLOCK_SIZE * (n // BLOCK_SIZE) + perm[n % BLOCK_SIZE]
    cells = grid.cells
    return Grid([
        cells[square_of(source(row), source(col))]
            for row in range(SIZE) for col in range(SIZE)
    ])

def permute_blocks(grid, perm):
    """Move whole bands of columns around, and then whole stacks of rows. The
    band (stack) at position b ends up at position perm[b].
    """
    dest = lambda n: BLOCK_SIZE * perm[n // BLOCK_SIZE] + n % BLOCK_SIZE
    cells = [None] * SQUARE_COUNT
    for square, mask in enumerate(grid.cells):
        row, col = row_col(square)
        cells[square_of(dest(row), dest(col))] = mask
    return Grid(cells)

class Generator:
    """Creates new puzzles. All the randomness comes from rng, so a generator
    built with a seeded random.Random makes the same puzzles every time.
    Don't share a generator between threads.
    """
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.diggable = [True] * SQUARE_COUNT
        self.diggable_count = SQUARE_COUNT
        self.given_lower_bound = 0
        self.row_col_lower_bound = 0

    def generate(self, difficulty):
        """Make a puzzle aimed at a difficulty and return a GeneratorContext."""
        if isinstance(difficulty, str):
            difficulty = Difficulty.from_name(difficulty)
        if difficulty not in config.GIVEN_LOWER_BOUND_RANGES:
            raise DifficultyError(
                "Can't generate a puzzle for difficulty {!r}".format(difficulty)
            )
        difficulty = Difficulty(difficulty)
        start = time()
        solution = self.create_terminal_pattern()
        problem = self.dig_holes(solution, difficulty)
        problem, solution = self.propagate(problem, solution)

        context = SolveContext()
        Solver().solve(problem, context)
        grading = grade(context)

        result = GeneratorContext(
            problem=problem,
            solution=solution,
            targeted_difficulty=difficulty,
            graded_difficulty=grading.difficulty,
            grading=grading,
            given_count=problem.given_count(),
            lower_bound=problem.lower_bound_in_rows_and_cols(),
            calculation_time=(time() - start) * 1000,
        )
        log.debug(
            'Generated %s puzzle graded %s with %d givens in %.0f ms',
            difficulty.label, result.graded_difficulty.label,
            result.given_count, result.calculation_time
        )
        return result

    ##
    ## Terminal patterns
    ##

    def start_creating(self):
        """Place the first few givens of a terminal pattern at random. A given
        is only kept if the grid is still consistent after reducing it.
        """
        grid = Grid()
        placed = 0
        while placed < config.INITIAL_GIVEN_COUNT:
            square = self.rng.randrange(SQUARE_COUNT)
            if grid.is_given(square):
                continue
            attempt = grid.copy()
            attempt.set_digit(square, self.rng.randint(1, SIZE))
            attempt = reduce(attempt)
            if attempt is not None:
                grid = attempt
                placed += 1
        return grid

    def finish_creating(self, grid):
        """Let the solver fill in the rest of the grid. Since the grid has
        lots of solutions at this point, we only need the first one, but
        some sets of givens have no solution at all and take forever to rule
        out; see errors.Catastrophic.
        """
        context = SolveContext()
        Solver().solve(grid, context, exit_at_first=True,
                       max_time=config.TERMINAL_PATTERN_MAX_TIME)
        if context.unique_solution is None:
            if context.calculation_time >= config.TERMINAL_PATTERN_MAX_TIME * 1000:
                log.warning(
                    'Terminal pattern not finished after %d search calls; '
                    'starting over', context.search_call_count
                )
            raise Catastrophic('No terminal pattern from these givens')
        return context.unique_solution

    def create_terminal_pattern(self):
        """Make a randomized solved grid."""
        attempts = 0
        while True:
            attempts += 1
            try:
                pattern = self.finish_creating(self.start_creating())
            except Catastrophic:
                continue
            log.debug('Terminal pattern found after %d attempt(s)', attempts)
            return pattern

    ##
    ## Digging
    ##

    def dig_holes(self, grid, difficulty):
        """Dig holes into a terminal pattern. Every square is tried exactly
        once; after that it's either a hole or a given for good.
        """
        problem = grid.copy()
        low, high = config.GIVEN_LOWER_BOUND_RANGES[difficulty]
        self.given_lower_bound = self.rng.randint(low, high)
        self.row_col_lower_bound = config.ROW_COL_LOWER_BOUNDS[difficulty]
        self.diggable = [True] * SQUARE_COUNT
        self.diggable_count = SQUARE_COUNT
        log.debug(
            'Digging holes for %s: at least %d givens, %d per row and column',
            difficulty.label, self.given_lower_bound, self.row_col_lower_bound
        )

        order = self.dig_order(config.DIG_ORDERS[difficulty])
        while self.diggable_count > 0:
            squares = next(order, None)
            if squares is None:
                # The order ran out before every square was tried; pick the
                # rest at random.
                order = self.order_random()
                squares = next(order)

            if self.diggable_count >= config.MINIMUM_TO_DIG_FOUR:
                batch = 4
            elif self.diggable_count >= config.MINIMUM_TO_DIG_TWO:
                batch = 2
            else:
                batch = 1

            for square in reversed(squares[:batch]):
                if not self.diggable[square]:
                    continue
                attempt = problem.copy()
                attempt.clear(square)
                if self.check_restrictions(attempt) and check_unique(attempt):
                    problem = attempt
                self.diggable[square] = False
                self.diggable_count -= 1

        log.debug('Dug down to %d givens', problem.given_count())
        return problem

    def check_restrictions(self, grid):
        return (grid.given_count() >= self.given_lower_bound and
                grid.lower_bound_in_rows_and_cols() >= self.row_col_lower_bound)

    def dig_order(self, name):
        """Get one of the order_* generators by name. Each one yields tuples
        of squares to dig, the first being the one the order picked.
        """
        return getattr(self, 'order_' + name)()

    def order_random(self):
        """Pick any square that hasn't been tried yet. There's no symmetry
        here, so only the square itself is yielded.
        """
        while True:
            candidates = [s for s in range(SQUARE_COUNT) if self.diggable[s]]
            yield (self.rng.choice(candidates),)

    def order_left_to_right(self):
        """Go through the grid like reading a book."""
        for square in range(SQUARE_COUNT):
            yield symmetric_squares(square)

    def order_zigzag(self):
        """Wander along the grid in an S shape, skipping every other square:
        rightwards on even rows, leftwards on odd rows, dropping down a row
        at the edge. This covers about half the grid.
        """
        square = 0
        while square < SQUARE_COUNT:
            yield symmetric_squares(square)
            row, col = row_col(square)
            if row % 2 == 0:
                square += 2 if col < SIZE - 1 else SIZE - 1
            else:
                square += -2 if col > 2 else SIZE - 1

    ##
    ## Shuffling
    ##

    def random_permutation(self):
        perm = list(range(BLOCK_SIZE))
        self.rng.shuffle(perm)
        return perm

    def propagate(self, problem, solution):
        """Shuffle the problem and the solution the same way, so they still
        belong together.
        """
        perm = self.random_permutation()
        problem = permute_cols_and_rows(problem, perm)
        solution = permute_cols_and_rows(solution, perm)

        block_perm = self.random_permutation()
        problem = permute_blocks(problem, block_perm)
        solution = permute_blocks(solution, block_perm)
        log.debug('Permuted rows and columns by %s, blocks by %s',
                  perm, block_perm)
        return problem, solution

def create_terminal_pattern(*, rng=None):
    """Make a randomized solved grid."""
    return Generator(rng).create_terminal_pattern()

def generate(difficulty, *, rng=None):
    """Shortcut to make one puzzle with a new Generator."""
    return Generator(rng).generate(difficulty)
