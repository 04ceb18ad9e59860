"""This is where exceptions defined for the sudoku package are located."""

class SudokuError(Exception):
    """Base exception for any errors defined in this package."""

class ParseError(SudokuError, ValueError):
    """Raised when puzzle text can't be read into a grid. A puzzle is nine
    lines of exactly nine characters each; anything else is rejected as a
    whole, we never hand back a partially filled grid.
    """

class DifficultyError(SudokuError, ValueError):
    """Raised for a difficulty name or tier that the generator doesn't know
    how to target.
    """

class Catastrophic(SudokuError):
    """Raised when creating a random terminal pattern if we've hit a
    catastrophic case. Normally, finishing the eleven random givens takes a
    few milliseconds. Once in a while though, the givens we placed have no
    solution at all, and the solver would do a depth first search over a huge
    part of the space of grid configurations before it finds that out.

    To prevent these catastrophic cases, the solver gets a time budget, and
    this is raised if it comes back without a solution. The generator catches
    it and starts over with a fresh set of givens. See
    Generator.create_terminal_pattern in create.py.
    """
