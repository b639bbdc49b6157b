"""
Fractal Perception - Online Multi-Level Sequence Abstraction

Consumes a stream of feature vectors and incrementally discovers a hierarchy
of discrete symbols, each level chunking the stream at a coarser timescale
than the one below.
"""

__version__ = "0.1.0"

from .spectrum import Spectrum
from .abstraction import transform, interpolate
from .concept import Concept, Symbol, generate_label
from .markov import UnigramModel, BigramModel
from .categorization import categorize
from .segmentation import segment
from .memory import EpisodicMemory, SemanticMemory
from .dimension import Dimension
from .config import PerceptionConfig
from .perception import Hierarchy, process

__all__ = [
    "Spectrum",
    "transform",
    "interpolate",
    "Concept",
    "Symbol",
    "generate_label",
    "UnigramModel",
    "BigramModel",
    "categorize",
    "segment",
    "EpisodicMemory",
    "SemanticMemory",
    "Dimension",
    "PerceptionConfig",
    "Hierarchy",
    "process",
]
