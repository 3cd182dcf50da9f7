"""Dictionary-driven Chinese text segmentation."""

from .core.dictionary import Dictionary, TrieNode
from .core.exceptions import (
    DagsegError,
    DictionaryFetchError,
    DictionaryFormatError,
    InvalidFrequencyError,
)
from .core.keywords import extract_keywords
from .core.models import DictionaryStats, SegmentationStrategy
from .core.segmenter import Segmenter

__version__ = "0.1.0"

__all__ = [
    "DagsegError",
    "Dictionary",
    "DictionaryFetchError",
    "DictionaryFormatError",
    "DictionaryStats",
    "InvalidFrequencyError",
    "SegmentationStrategy",
    "Segmenter",
    "TrieNode",
    "extract_keywords",
]
