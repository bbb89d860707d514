"""
Seeded shuffling for practice sessions.
"""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar('T')


class Shuffler:
    """
    Reproducible source of shuffles and samples.

    Each session owns one Shuffler; pass a seed to replay the same order.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of items (Fisher-Yates)."""
        shuffled = list(items)
        self._random.shuffle(shuffled)
        return shuffled

    def sample(self, items: Sequence[T], count: int) -> List[T]:
        """Return up to count distinct items in random order."""
        if count <= 0 or not items:
            return []
        return self._random.sample(list(items), min(count, len(items)))
