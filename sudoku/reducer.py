"""
Candidate elimination. When a square is a given, its digit can be removed
from the candidates of every peer (the squares in the same row, column, and
block). If that leaves a peer with no candidates at all, the grid is
inconsistent. That's not an error, it just means the grid is a dead end, so
both functions here report it with their return value instead of raising.
"""

from .config import PEERS
from .data import ALL, COUNTS

def eliminate(cells, square, mask):
    """Remove mask from the peers of square, in place. Returns False as soon
    as a peer runs out of candidates; the cells are left half done in that
    case and should be thrown away.
    """
    keep = ALL & ~mask
    for peer in PEERS[square]:
        value = cells[peer] & keep
        if not value:
            return False
        cells[peer] = value
    return True

def reduce(grid):
    """Eliminate the digit of every given in grid from its peers and return
    the result as a new grid, or None if the grid is inconsistent.

    Only the squares that are givens in the grid we were handed are used.
    Squares that become solved during this pass are not propagated any
    further, so the result isn't necessarily fully reduced. The solver
    makes up for that by reducing again once every square is solved.
    """
    reduced = grid.copy()
    cells = reduced.cells
    for square, mask in enumerate(grid.cells):
        if COUNTS[mask] == 1:
            if not eliminate(cells, square, mask):
                return None
    return reduced

def reduce_square(square, grid):
    """The square was just set to a single digit; eliminate that digit from
    its peers in place. Returns True if the grid is still consistent.
    """
    cells = grid.cells
    return eliminate(cells, square, cells[square])
