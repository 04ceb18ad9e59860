#! /usr/bin/env python3

"""Basic profiling for sudoku"""

import profile
import random

from sudoku.config import Difficulty
from sudoku.create import Generator

def difficulties():
    for n in range(3):
        yield from (Difficulty.VERY_EASY, Difficulty.MEDIUM, Difficulty.SAMURAI)

def main():
    generator = Generator(random.Random(267))
    for difficulty in difficulties():
        generator.generate(difficulty)

if __name__ == '__main__':
    profile.run('main()', sort='tottime')
