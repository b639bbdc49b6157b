"""
Memory Module

Dual memory of a dimension:
- EpisodicMemory: the ordered log of symbols plus the open segment
- SemanticMemory: the space of concepts, keyed by label
"""

from typing import Dict, Iterator, List, Optional
from dataclasses import dataclass, field

from .concept import Concept, Label, Symbol
from .constants import START_CONTENT, START_LABEL


def start_symbol() -> Symbol:
    """Dummy symbol standing before the first event."""
    return Symbol(label=START_LABEL, content=START_CONTENT, length=0)


@dataclass
class MemoryHead:
    """
    Most recent symbol and the unfinished segment.

    Attributes:
        previous: Previous symbol, compared with the current one
        ongoing: Open segment, chopped off at a boundary
    """
    previous: Symbol = field(default_factory=start_symbol)
    ongoing: List[Symbol] = field(default_factory=list)


@dataclass
class EpisodicMemory:
    """
    Previously seen symbols of a dimension.

    Attributes:
        sequence: Every symbol in the order it was seen
        head: Most recent symbol and the open segment
        segments: Closed segments in the order they were closed
    """
    sequence: List[Symbol] = field(default_factory=list)
    head: MemoryHead = field(default_factory=MemoryHead)
    segments: List[List[Symbol]] = field(default_factory=list)

    def update(self, symbol: Symbol) -> None:
        """Append the symbol to the log and the open segment."""
        self.sequence.append(symbol)
        self.head.ongoing.append(symbol)
        self.head.previous = symbol

    def close_segment(self) -> List[Symbol]:
        """
        Close the open segment and start an empty one.

        Returns:
            Symbols of the closed segment
        """
        closed = self.head.ongoing
        self.segments.append(closed)
        self.head.ongoing = []
        return closed

    @property
    def previous_label(self) -> Label:
        return self.head.previous.label

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass
class SemanticMemory:
    """Conceptual space of a dimension: label -> concept, in creation order."""
    space: Dict[Label, Concept] = field(default_factory=dict)

    def update(self, category: Label, concept: Concept, count: int) -> Concept:
        """
        Insert the concept under the category if new, then update the stored
        concept with the observation.

        Args:
            category: Label of the category to insert into / update
            concept: Fresh concept built from the observation
            count: Occurrences of the category including this observation

        Returns:
            The stored concept
        """
        stored = self.space.get(category)
        if stored is None:
            concept.label = category
            self.space[category] = concept
            stored = concept
        stored.update(concept.moments.sample_mean, count)
        return stored

    def get(self, label: Label) -> Optional[Concept]:
        return self.space.get(label)

    def __getitem__(self, label: Label) -> Concept:
        return self.space[label]

    def __contains__(self, label: object) -> bool:
        return label in self.space

    def __iter__(self) -> Iterator[Label]:
        return iter(self.space)

    def __len__(self) -> int:
        return len(self.space)
