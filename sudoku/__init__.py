"""Solve, generate, and grade 9x9 sudoku puzzles."""

from .config import Difficulty
from .data import Grid, CandidateSet
from .solver import Solver, SolveContext, solve
from .grader import Grading, grade
from .create import Generator, GeneratorContext, check_unique, generate
from .util import string_to_grid, grid_to_string, read_grid
from .errors import SudokuError, ParseError, DifficultyError
