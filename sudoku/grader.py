"""
Grade the difficulty of a puzzle from a finished solver run.

Three things are measured and each is scored from 1 (easy) to 5 (hard):

1) The number of givens in the problem.
2) The lowest number of givens in any row or column.
3) The number of search calls the solver needed to go through the whole
   puzzle.

The weighted sum of the scores, rounded, is the graded difficulty.
"""

from collections import namedtuple

from . import config
from .config import Difficulty

class Grading(namedtuple('Grading', 'score given_score lower_bound_score '
                                    'search_calls_score')):
    __slots__ = ()

    @property
    def difficulty(self):
        # round() goes to the even neighbour on .5, like the tier scale expects
        return Difficulty(round(self.score))

def threshold_score(value, thresholds):
    for threshold, score in thresholds:
        if value >= threshold:
            return score
    return config.MAX_SCORE

def given_score(num_given):
    return threshold_score(num_given, config.GIVEN_SCORES)

def lower_bound_score(lower_bound):
    return threshold_score(lower_bound, config.LOWER_BOUND_SCORES)

def search_calls_score(num_search_calls):
    for threshold, score in config.SEARCH_CALL_SCORES:
        if num_search_calls < threshold:
            return score
    return config.MAX_SCORE

def weighted_score(given, lower_bound, search_calls):
    return (config.GIVEN_WEIGHT * given +
            config.LOWER_BOUND_WEIGHT * lower_bound +
            config.SEARCH_CALLS_WEIGHT * search_calls)

def grade(context):
    """Grade the problem of a SolveContext. The context should come from a
    solve without exit_at_first or a time limit; otherwise the search call
    count doesn't cover the whole puzzle.
    """
    problem = context.problem
    scores = (
        given_score(problem.given_count()),
        lower_bound_score(problem.lower_bound_in_rows_and_cols()),
        search_calls_score(context.search_call_count),
    )
    return Grading(weighted_score(*scores), *scores)
