"""
Candidate sets and the Grid object.

A candidate set is a plain int used as a 9 bit mask: bit n is set if digit
n+1 is still possible in the square. A square is solved (a 'given') when
exactly one bit is set. An empty set is never stored in a grid; the reducer
treats it as a contradiction and abandons the grid instead.
"""

import gmpy2

from .config import SIZE, SQUARE_COUNT, ROWS, COLS

NONE  = 0
ONE   = 1 << 0
TWO   = 1 << 1
THREE = 1 << 2
FOUR  = 1 << 3
FIVE  = 1 << 4
SIX   = 1 << 5
SEVEN = 1 << 6
EIGHT = 1 << 7
NINE  = 1 << 8
ALL   = ONE | TWO | THREE | FOUR | FIVE | SIX | SEVEN | EIGHT | NINE

DIGIT_BITS = (ONE, TWO, THREE, FOUR, FIVE, SIX, SEVEN, EIGHT, NINE)

# Lookup tables indexed by mask. Popcounts and digit lists get asked for in
# the inner loop of the solver, so we only pay for gmpy2 once.
COUNTS = tuple(int(gmpy2.popcount(mask)) for mask in range(ALL + 1))
DIGITS = tuple(
    tuple(n + 1 for n in range(SIZE) if gmpy2.bit_test(mask, n))
        for mask in range(ALL + 1)
)

def CandidateSet(*digits):
    """Build a candidate set from digits 1-9."""
    mask = NONE
    for digit in digits:
        mask |= DIGIT_BITS[digit - 1]
    return mask

def has_candidate(mask, digit):
    return bool(mask & DIGIT_BITS[digit - 1])

def add_candidate(mask, digit):
    return mask | DIGIT_BITS[digit - 1]

def remove_candidate(mask, digit):
    return mask & ~DIGIT_BITS[digit - 1]

def candidate_count(mask):
    return COUNTS[mask]

def candidate_digits(mask):
    """The digits in the set, lowest first."""
    return DIGITS[mask]

def is_single(mask):
    return COUNTS[mask] == 1

def single_digit(mask):
    """If the set holds one digit, return it; otherwise return None."""
    if COUNTS[mask] == 1:
        return DIGITS[mask][0]
    return None

class Grid:
    """The candidate sets of all 81 squares, stored in a flat list so that
    copying a grid is just copying a list of ints. The solver and generator
    copy a grid before every speculative change, so a failed guess or dig
    never touches the grid it came from.

    Squares can be addressed with their index (0-80) or a (row, col) tuple.
    """
    def __init__(self, cells=None):
        if cells is None:
            cells = [ALL] * SQUARE_COUNT
        elif len(cells) != SQUARE_COUNT:
            raise ValueError(
                'A grid has {} squares, got {}'.format(SQUARE_COUNT, len(cells))
            )
        self.cells = list(cells)

    @staticmethod
    def _square(key):
        if isinstance(key, tuple):
            row, col = key
            return row * SIZE + col
        return key

    def __getitem__(self, key):
        return self.cells[self._square(key)]

    def __setitem__(self, key, mask):
        self.cells[self._square(key)] = mask

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        return 'Grid({!r})'.format(''.join(str(self).split()))

    def __str__(self):
        """Nine lines of nine characters. Solved squares show their digit,
        everything else is a '.'.
        """
        lines = []
        for row in ROWS:
            lines.append(''.join(
                str(DIGITS[self.cells[s]][0]) if COUNTS[self.cells[s]] == 1 else '.'
                    for s in row
            ))
        return '\n'.join(lines) + '\n'

    def copy(self):
        grid = Grid.__new__(Grid)
        grid.cells = self.cells[:]
        return grid

    def set_digit(self, key, digit):
        """Make a square a given. This doesn't touch the peers; see reducer.py."""
        self.cells[self._square(key)] = DIGIT_BITS[digit - 1]

    def clear(self, key):
        """Open a square back up to every candidate."""
        self.cells[self._square(key)] = ALL

    def is_given(self, key):
        return COUNTS[self.cells[self._square(key)]] == 1

    def value(self, key):
        """The digit in a square, or None if it isn't solved."""
        return single_digit(self.cells[self._square(key)])

    def all_given(self):
        return all(COUNTS[mask] == 1 for mask in self.cells)

    def given_count(self):
        return sum(1 for mask in self.cells if COUNTS[mask] == 1)

    def lower_bound_in_rows_and_cols(self):
        """The smallest number of givens found in any row or any column."""
        return min(
            sum(1 for s in house if COUNTS[self.cells[s]] == 1)
                for house in ROWS + COLS
        )
