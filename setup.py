#! /usr/bin/env python3

from setuptools import setup

setup(name='sudoku',
      version='1.0.0',
      description='Solve, generate, and grade 9x9 sudoku puzzles',
      author='Joseph Tibbertsma',
      author_email='josephtibbertsma@gmail.com',
      packages=['sudoku'],
      python_requires='>=3.8',
      install_requires=['gmpy2'],
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': ['sudoku = sudoku.cli:main'],
      })
