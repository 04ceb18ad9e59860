"""
Command line tool. All results are written to standard output.

To solve a puzzle:      python -m sudoku solve <filepath>
To generate a puzzle:   python -m sudoku generate [veryeasy|easy|medium|hard|samurai]
"""

import argparse
import logging
import random

from .config import Difficulty, DIFFICULTY_NAMES
from .create import Generator
from .errors import ParseError
from .grader import grade
from .solver import Solver, SolveContext
from .util import read_grid, write_solution, write_generation

log = logging.getLogger(__name__)

UNEXPECTED_ERROR = 'Unexpected error. Check the input.'

def build_parser():
    parser = argparse.ArgumentParser(
        prog='sudoku',
        description='Solve or generate 9x9 sudoku puzzles.'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='log debug messages'
    )
    commands = parser.add_subparsers(dest='command')

    solve_parser = commands.add_parser(
        'solve', help='solve the puzzle in a file and grade it'
    )
    solve_parser.add_argument(
        'filepath', help='nine lines of nine characters; 1-9 for givens'
    )

    generate_parser = commands.add_parser(
        'generate', help='generate a new puzzle'
    )
    generate_parser.add_argument(
        'level', type=str.lower, choices=DIFFICULTY_NAMES,
        help='the difficulty to aim for'
    )
    generate_parser.add_argument(
        '--seed', type=int, default=None,
        help='seed for the random number generator'
    )
    return parser

def solve(filepath, file=None):
    """Solve a puzzle file and write the report. Returns an exit status."""
    try:
        grid = read_grid(filepath)
        context = SolveContext()
        Solver().solve(grid, context)
        grading = None
        if context.unique_solution is not None:
            grading = grade(context)
        write_solution(filepath, context, grading, file=file)
    except ParseError as e:
        print(e, file=file)
        return 1
    except Exception:
        log.debug('Solving %s failed', filepath, exc_info=True)
        print(UNEXPECTED_ERROR, file=file)
        return 1
    return 0

def generate(level, seed=None, file=None):
    """Generate a puzzle and write the report. Returns an exit status."""
    generator = Generator(random.Random(seed))
    result = generator.generate(Difficulty.from_name(level))
    write_generation(result, file=file)
    return 0

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )
    if args.command == 'solve':
        return solve(args.filepath)
    if args.command == 'generate':
        return generate(args.level, seed=args.seed)
    parser.print_usage()
    return 2
