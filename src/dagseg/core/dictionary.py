"""Dictionary store: character trie plus word log-probability table."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

from .exceptions import DictionaryFormatError, InvalidFrequencyError
from .models import DictionaryEntry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TrieNode:
    """A trie node: children keyed by character, plus a word-end flag."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    terminal: bool = False

    def child(self, char: str) -> TrieNode | None:
        return self.children.get(char)

    def clone(self) -> TrieNode:
        return TrieNode(
            children={ch: node.clone() for ch, node in self.children.items()},
            terminal=self.terminal,
        )


def validate_frequency(word: str, freq: Any) -> float:
    """Return ``freq`` as a float, or raise InvalidFrequencyError.

    Booleans, NaN, infinities, non-numbers and values <= 0 are rejected.
    """
    if freq is None:
        raise InvalidFrequencyError(f"Missing frequency for word {word!r}", word=word)
    if isinstance(freq, bool) or not isinstance(freq, Real):
        raise InvalidFrequencyError(
            f"Frequency for word {word!r} is not a number: {freq!r}", word=word
        )
    value = float(freq)
    if not math.isfinite(value) or value <= 0:
        raise InvalidFrequencyError(
            f"Frequency for word {word!r} must be positive, got {freq!r}", word=word
        )
    return value


def _normalize_entry(entry: Any) -> tuple[str, float]:
    if isinstance(entry, DictionaryEntry):
        word, freq = entry.to_tuple()
    elif isinstance(entry, (tuple, list)):
        if not entry:
            raise DictionaryFormatError("Empty dictionary entry")
        word = entry[0]
        freq = entry[1] if len(entry) > 1 else None
    else:
        raise DictionaryFormatError(f"Unsupported dictionary entry: {entry!r}")

    if not isinstance(word, str) or not word:
        raise DictionaryFormatError(f"Dictionary word must be a non-empty string: {word!r}")
    return word, validate_frequency(word, freq)


def _insert(root: TrieNode, word: str) -> None:
    node = root
    for char in word:
        nxt = node.children.get(char)
        if nxt is None:
            nxt = TrieNode()
            node.children[char] = nxt
        node = nxt
    node.terminal = True


class Dictionary:
    """Trie and frequency table built from weighted dictionary entries.

    Log-probabilities are ``ln(freq / total)`` where ``total`` is the sum of
    raw frequencies at build time. ``min_freq`` is the smallest of them and
    serves as the floor for matched substrings without a table entry.

    ``add_word`` is an O(1) update: it scores the new word against the
    existing ``total`` and leaves ``total`` and ``min_freq`` untouched, so
    both go stale relative to a full rebuild that included the word.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self.freq: dict[str, float] = {}
        self.total = 0.0
        self.min_freq = 0.0

    @classmethod
    def build(
        cls, entries: Iterable[Any] | Mapping[str, float]
    ) -> Dictionary:
        """Build a new dictionary from (word, freq) entries.

        Every entry is validated before the trie is touched, so a rejected
        build leaves nothing behind. A repeated word keeps its last
        frequency but every occurrence counts toward ``total``.

        Raises:
            InvalidFrequencyError: If any frequency is missing or not positive.
            DictionaryFormatError: If an entry is malformed or a word is empty.
        """
        if isinstance(entries, Mapping):
            entries = entries.items()
        pairs = [_normalize_entry(entry) for entry in entries]

        dictionary = cls()
        raw: dict[str, float] = {}
        total = 0.0
        for word, freq in pairs:
            raw[word] = freq
            total += freq
            _insert(dictionary.root, word)

        dictionary.total = total
        dictionary.freq = {word: math.log(freq / total) for word, freq in raw.items()}
        dictionary.min_freq = min(dictionary.freq.values()) if dictionary.freq else 0.0

        logger.debug(
            "Built dictionary: %d words, total=%s, min_freq=%.4f",
            len(dictionary.freq),
            total,
            dictionary.min_freq,
        )
        return dictionary

    def __len__(self) -> int:
        return len(self.freq)

    def __contains__(self, word: object) -> bool:
        return word in self.freq

    @property
    def word_count(self) -> int:
        return len(self.freq)

    def log_freq(self, word: str) -> float:
        """Log-probability of ``word``, or ``min_freq`` if it has none."""
        return self.freq.get(word, self.min_freq)

    def is_word(self, word: str) -> bool:
        """Whether ``word`` ends on a terminal trie node."""
        node: TrieNode | None = self.root
        for char in word:
            node = node.child(char)
            if node is None:
                return False
        return bool(word) and node.terminal

    def add_word(self, word: str, freq: float = 1) -> None:
        """Insert or overwrite a single word in place.

        Uses the existing ``total`` as denominator; before any frequency
        has been counted the word's own frequency is used instead.
        """
        if not isinstance(word, str) or not word:
            raise DictionaryFormatError(f"Dictionary word must be a non-empty string: {word!r}")
        value = validate_frequency(word, freq)
        denominator = self.total if self.total > 0 else value
        self.freq[word] = math.log(value / denominator)
        _insert(self.root, word)

    def copy(self) -> Dictionary:
        """Independent snapshot with its own trie and table."""
        other = Dictionary()
        other.root = self.root.clone()
        other.freq = dict(self.freq)
        other.total = self.total
        other.min_freq = self.min_freq
        return other

    def with_word(self, word: str, freq: float = 1) -> Dictionary:
        """Copy-on-write variant of ``add_word``; ``self`` is left unchanged."""
        other = self.copy()
        other.add_word(word, freq)
        return other
