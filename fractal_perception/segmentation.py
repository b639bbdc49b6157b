"""
Segmentation Module
"""

from .concept import Label
from .markov import UnigramModel


def segment(unigram: UnigramModel[Label], previous: Label, current: Label) -> bool:
    """
    Determines whether to segment at the current position.

    A boundary fires when the stream moves into a category rarer than the one
    it just left. Comparing counts is equivalent to comparing information
    content, -log2(count / total).

    Args:
        unigram: Unigram model of this level
        previous: Label of the symbol before the current symbol
        current: Label of the current symbol
    """
    return unigram.count(previous) > unigram.count(current)


__all__ = ['segment']
