"""Dictionary-driven segmentation of Chinese and mixed-script text."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from .config import get_settings
from .dag import build_dag
from .dictionary import Dictionary
from .dictionary_loader import load_entries
from .exceptions import DagsegError
from .models import DEFAULT_ENTRIES, DictionaryStats, SegmentationStrategy
from .route import best_spans, compute_route

logger = logging.getLogger(__name__)

# Runs cut through the DAG: CJK ideographs, ASCII letters/digits and + # & . _
RE_HAN = re.compile(r"([\u4E00-\u9FA5a-zA-Z0-9+#&._]+)")
# Unicode \s: includes \x1c-\x1f and \x85, excludes \ufeff
RE_SKIP = re.compile(r"(\s+)")
RE_ENG = re.compile(r"[a-zA-Z0-9]")


class Segmenter:
    """Cuts text into tokens using a weighted word dictionary.

    The segmenter owns a single ``Dictionary``. Reads (``cut``, ``cut_all``)
    never mutate it; ``build`` swaps in a fresh snapshot and ``add_word``
    updates the current one in place. No locking is done here: callers
    sharing a segmenter across threads must serialize mutations against
    reads, or share ``Dictionary.with_word`` snapshots instead.
    """

    def __init__(
        self,
        entries: Iterable[Any] | None = None,
        dictionary: Dictionary | None = None,
    ) -> None:
        if dictionary is None:
            dictionary = Dictionary.build(DEFAULT_ENTRIES if entries is None else entries)
        self._dictionary = dictionary
        self._full_dictionary = False
        self._hmm_warned = False

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def is_loaded(self) -> bool:
        """Whether a full dictionary has been loaded via ``load_dictionary``."""
        return self._full_dictionary

    def build(self, entries: Iterable[Any]) -> None:
        """Replace the dictionary with one built from ``entries``.

        Raises:
            InvalidFrequencyError: If any frequency is missing or not positive;
                the current dictionary is kept.
        """
        self._dictionary = Dictionary.build(entries)
        self._full_dictionary = False

    def load_dictionary(self, source: Path | str | None = None) -> bool:
        """Replace the dictionary with a full one from ``source``.

        ``source`` is None for the bundled jieba dictionary, an http(s) URL
        or a local file. Every call re-reads and rebuilds, so a second call
        replaces an already loaded dictionary. On failure the current
        dictionary is kept and False is returned.
        """
        settings = get_settings()
        try:
            entries = load_entries(
                source, timeout=settings.http_timeout, retries=settings.http_retries
            )
            dictionary = Dictionary.build(entries)
        except (DagsegError, OSError) as e:
            logger.warning("Failed to load dictionary from %s, keeping current: %s", source or "jieba", e)
            return False

        self._dictionary = dictionary
        self._full_dictionary = True
        logger.info("Full dictionary loaded: %d words", dictionary.word_count)
        return True

    def add_word(self, word: str, freq: float = 1) -> None:
        """Add or overwrite a word; ``total`` and ``min_freq`` are not recomputed."""
        self._dictionary.add_word(word, freq)

    def stats(self) -> DictionaryStats:
        dictionary = self._dictionary
        return DictionaryStats(
            word_count=dictionary.word_count,
            total=dictionary.total,
            min_log_freq=dictionary.min_freq,
            is_full_dictionary=self._full_dictionary,
        )

    def _cut_dag_no_hmm(self, dictionary: Dictionary, block: str) -> Iterator[str]:
        dag = build_dag(dictionary, block)
        route = compute_route(dictionary, block, dag)
        buf = ""
        for start, stop in best_spans(route):
            word = block[start:stop]
            if len(word) == 1 and RE_ENG.match(word):
                buf += word
                continue
            if buf:
                yield buf
                buf = ""
            yield word
        if buf:
            yield buf

    def _cut_dag(self, dictionary: Dictionary, block: str) -> Iterator[str]:
        # Unknown-word recovery is not implemented; same output as DAG_ONLY.
        if not self._hmm_warned:
            logger.warning("HMM segmentation is not implemented, using DAG-only cutting")
            self._hmm_warned = True
        return self._cut_dag_no_hmm(dictionary, block)

    def iter_cut(
        self, sentence: str, strategy: SegmentationStrategy = SegmentationStrategy.DAG_ONLY
    ) -> Iterator[str]:
        """Yield tokens of ``sentence``; their concatenation is ``sentence``."""
        dictionary = self._dictionary
        if strategy is SegmentationStrategy.DAG_PLUS_HMM:
            cut_block = self._cut_dag
        else:
            cut_block = self._cut_dag_no_hmm

        for block in RE_HAN.split(sentence):
            if not block:
                continue
            if RE_HAN.fullmatch(block):
                yield from cut_block(dictionary, block)
                continue
            for part in RE_SKIP.split(block):
                if not part:
                    continue
                if RE_SKIP.fullmatch(part):
                    yield part
                else:
                    yield from part

    def cut(self, sentence: str, use_hmm: bool = False) -> list[str]:
        """Cut ``sentence`` into tokens along the most probable path."""
        return list(self.iter_cut(sentence, SegmentationStrategy.from_flag(use_hmm)))

    def cut_all(self, sentence: str) -> list[str]:
        """Every dictionary match in ``sentence``, by start then end offset."""
        dag = build_dag(self._dictionary, sentence)
        return [sentence[i : j + 1] for i in range(len(sentence)) for j in dag[i]]
