"""
Markov Model Module

Occurrence counters over category labels:
- UnigramModel: how often each key has been seen
- BigramModel: how often each ordered pair of keys has been seen
"""

from typing import Dict, Generic, Hashable, Iterator, Tuple, TypeVar
import math

K = TypeVar("K", bound=Hashable)


class UnigramModel(Generic[K]):
    """
    Counts the number of times a given (length 1) key has been seen.

    Attributes:
        total: Number of keys seen (total keys, not distinct keys)
    """

    def __init__(self):
        self._counts: Dict[K, int] = {}
        self.total = 0

    def increment(self, key: K) -> None:
        """Add the key to the model, or increment it if already present."""
        self.total += 1
        self._counts[key] = self._counts.get(key, 0) + 1

    def count(self, key: K) -> int:
        """Count of the key; 0 for unseen keys."""
        return self._counts.get(key, 0)

    def probability(self, key: K) -> float:
        if self.total == 0:
            return 0.0
        return self.count(key) / self.total

    def information_content(self, key: K) -> float:
        """
        Surprisal of the key in bits: -log2(count / total).

        Unseen keys are infinitely surprising.
        """
        p = self.probability(key)
        if p == 0.0:
            return math.inf
        return -math.log2(p)

    def __getitem__(self, key: K) -> int:
        return self._counts[key]

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[K]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def items(self) -> Iterator[Tuple[K, int]]:
        return iter(self._counts.items())


class BigramModel(Generic[K]):
    """
    Counts the number of times ordered pairs of keys have been seen.

    Stored as a map from the first key to a UnigramModel of second keys.
    """

    def __init__(self):
        self._bigram: Dict[K, UnigramModel[K]] = {}
        self.total = 0

    def increment(self, first: K, second: K) -> None:
        """Add the pair (first, second), or increment it if already present."""
        self.total += 1
        if first not in self._bigram:
            self._bigram[first] = UnigramModel()
        self._bigram[first].increment(second)

    def count(self, first: K) -> int:
        """Number of pairs starting with the given key."""
        followers = self._bigram.get(first)
        return followers.total if followers is not None else 0

    def pair_count(self, first: K, second: K) -> int:
        followers = self._bigram.get(first)
        return followers.count(second) if followers is not None else 0

    def transition_probability(self, first: K, second: K) -> float:
        """P(second | first), 0.0 when ``first`` was never seen."""
        n = self.count(first)
        if n == 0:
            return 0.0
        return self.pair_count(first, second) / n

    def __contains__(self, first: object) -> bool:
        return first in self._bigram

    def __len__(self) -> int:
        return len(self._bigram)


__all__ = [
    'UnigramModel',
    'BigramModel',
]
