"""
Grid geometry and the settings that drive puzzle generation and grading.

Squares are numbered 0 to 80, row by row. Every table in this module is
calculated once when the module is imported and only read afterwards.
"""

from enum import IntEnum

import gmpy2

from .errors import DifficultyError

SIZE = 9
assert gmpy2.is_square(SIZE), "size must be a square number"
BLOCK_SIZE = int(gmpy2.isqrt(SIZE))
SQUARE_COUNT = SIZE * SIZE

def square_of(row, col):
    return row * SIZE + col

def row_col(square):
    return divmod(square, SIZE)

def default_keylists(size=SIZE):
    """Build one list of squares for each block. Blocks are numbered left to
    right, top to bottom, and the squares in a block come in reading order.
    """
    groupwidth = int(gmpy2.isqrt(size))
    k1 = lambda i, j: i // groupwidth + (j // groupwidth) * groupwidth
    k2 = lambda i, j: i %  groupwidth + (j %  groupwidth) * groupwidth
    return [
        [k1(i,j) * size + k2(i,j) for i in range(size)]
            for j in range(size)
    ]

def calculate_housekeys(size=SIZE):
    """Calculate the rows, cols, and blocks of the grid as tuples of squares."""
    rows = tuple(tuple(i * size + j for j in range(size)) for i in range(size))
    cols = tuple(tuple(i * size + j for i in range(size)) for j in range(size))
    blocks = tuple(tuple(keys) for keys in default_keylists(size))
    return rows, cols, blocks

def build_config(blocks):
    """Map each square to the block it belongs to. This is the block lookup
    table; each square maps to a tuple that contains itself.
    """
    grid = {}
    for keylist in blocks:
        for key in keylist:
            grid[key] = keylist
    return tuple(grid[square] for square in range(len(grid)))

def calculate_peers(rows, cols, block_of):
    """Calculate the peers of each square: the other squares in its row, then
    the other squares in its column, then the other squares in its block.
    A peer can show up twice since the block overlaps the row and column;
    eliminating a candidate twice is harmless, so we don't bother removing the
    duplicates.
    """
    size = len(rows)
    peers = []
    for square in range(size * size):
        row, col = divmod(square, size)
        peers.append(tuple(
            key for key in rows[row] + cols[col] + block_of[square]
                if key != square
        ))
    return tuple(peers)

ROWS, COLS, BLOCKS = calculate_housekeys()
BLOCK_OF = build_config(BLOCKS)
PEERS = calculate_peers(ROWS, COLS, BLOCK_OF)

##
## Difficulty
##

class Difficulty(IntEnum):
    """Difficulty tiers, ordered from easiest to hardest. The grader maps its
    weighted score straight onto this scale, which is why the values matter.
    """
    UNKNOWN = 0
    VERY_EASY = 1
    EASY = 2
    MEDIUM = 3
    HARD = 4
    SAMURAI = 5

    @classmethod
    def from_name(cls, name):
        """Look up a tier by its command line name, e.g. 'veryeasy'."""
        try:
            return _DIFFICULTY_NAMES[name.lower()]
        except (KeyError, AttributeError):
            raise DifficultyError(
                'Unknown difficulty: {!r}. Expected one of: {}'.format(
                    name, ', '.join(_DIFFICULTY_NAMES))
            ) from None

    @property
    def label(self):
        return ''.join(word.capitalize() for word in self.name.split('_'))

_DIFFICULTY_NAMES = {
    'veryeasy': Difficulty.VERY_EASY,
    'easy':     Difficulty.EASY,
    'medium':   Difficulty.MEDIUM,
    'hard':     Difficulty.HARD,
    'samurai':  Difficulty.SAMURAI,
}

DIFFICULTY_NAMES = tuple(_DIFFICULTY_NAMES)

##
## Generator settings
##

# Number of random givens placed before the solver finishes a terminal pattern
INITIAL_GIVEN_COUNT = 11
# Seconds the solver gets to finish a terminal pattern before we start over
TERMINAL_PATTERN_MAX_TIME = 5

# Dig four squares per round while at least this many squares are undecided,
# two while at least MINIMUM_TO_DIG_TWO are, and one after that.
MINIMUM_TO_DIG_FOUR = 61
MINIMUM_TO_DIG_TWO = 51

# The total number of givens is not allowed to drop below a number drawn
# uniformly from this range (inclusive).
GIVEN_LOWER_BOUND_RANGES = {
    Difficulty.VERY_EASY: (50, 60),
    Difficulty.EASY:      (36, 49),
    Difficulty.MEDIUM:    (32, 35),
    Difficulty.HARD:      (28, 31),
    Difficulty.SAMURAI:   (22, 27),
}

# No row or column may have fewer givens than this.
ROW_COL_LOWER_BOUNDS = {
    Difficulty.VERY_EASY: 5,
    Difficulty.EASY:      4,
    Difficulty.MEDIUM:    3,
    Difficulty.HARD:      2,
    Difficulty.SAMURAI:   0,
}

# The order in which squares are visited when digging holes. See the order_*
# methods of create.Generator.
DIG_ORDERS = {
    Difficulty.VERY_EASY: 'random',
    Difficulty.EASY:      'random',
    Difficulty.MEDIUM:    'zigzag',
    Difficulty.HARD:      'left_to_right',
    Difficulty.SAMURAI:   'left_to_right',
}

##
## Grader settings
##

# (threshold, score) pairs; the first pair whose threshold is met wins,
# otherwise the score is 5.
GIVEN_SCORES = ((50, 1), (36, 2), (32, 3), (28, 4))
LOWER_BOUND_SCORES = ((5, 1), (4, 2), (3, 3), (1, 4))
# For search calls the count has to be below the threshold.
SEARCH_CALL_SCORES = ((100, 1), (1000, 2), (10000, 3), (100000, 4))
MAX_SCORE = 5

GIVEN_WEIGHT = 0.5
LOWER_BOUND_WEIGHT = 0.3
SEARCH_CALLS_WEIGHT = 0.2
