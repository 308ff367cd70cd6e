"""
Shuffle Logic - randomized question delivery.

Pure Python only: no database, no Flask.
"""
import random
from typing import List, Optional, Sequence, TypeVar

from examquiz_app.logics.question_options import QuestionOptions, normalize_options

T = TypeVar('T')

__all__ = ['normalize_options', 'pick_random', 'shuffle_options', 'shuffled']


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a Fisher-Yates shuffled copy of ``items``."""
    rng = rng or random
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def shuffle_options(options: QuestionOptions, rng: Optional[random.Random] = None) -> QuestionOptions:
    """
    Shuffle the candidate answers.

    Keyed options keep their labels in order; only the values move between
    labels, so ``{"A": .., "B": ..}`` stays ``A, B, ...`` for display.
    """
    values = tuple(shuffled(options.values, rng))
    return QuestionOptions(options.kind, values, options.keys)


def pick_random(items: Sequence[T], rng: Optional[random.Random] = None) -> Optional[T]:
    """A uniformly random element of ``items`` or None when empty."""
    if not items:
        return None
    return shuffled(items, rng)[0]
