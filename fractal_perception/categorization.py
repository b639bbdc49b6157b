"""
Categorization Module

Assigns an observation to the rarest existing category whose region contains
it, or to a brand-new category when no region does.
"""

from typing import List, Mapping

import numpy as np

from .concept import Concept, Label, generate_label
from .markov import UnigramModel


def candidates(new_vector: np.ndarray, categories: Mapping[Label, Concept]) -> List[Label]:
    """
    Labels whose region contains the vector, in insertion order.

    Raises:
        ValueError: If the vector does not match a category's dimension
    """
    return [label for label, concept in categories.items() if concept.contains(new_vector)]


def categorize(new_vector: np.ndarray,
               categories: Mapping[Label, Concept],
               counts: UnigramModel[Label]) -> Label:
    """
    Returns the category label for a new observation.

    Among the candidate categories the one with the fewest occurrences wins,
    i.e. the match carrying the most information. Ties go to the category
    created first. Without any candidate a new label is minted.

    Args:
        new_vector: Observed point
        categories: Semantic memory, label to concept
        counts: Occurrence counts of the labels

    Returns:
        Existing or freshly generated label
    """
    matches = candidates(new_vector, categories)
    if not matches:
        return generate_label()
    # min() keeps the first of equal keys
    return min(matches, key=counts.count)


__all__ = [
    'candidates',
    'categorize',
]
