"""Frequency-based keyword extraction on top of segmentation."""

import re
from collections import Counter

from .segmenter import Segmenter

RE_CJK = re.compile(r"[\u4E00-\u9FA5]")


def extract_keywords(segmenter: Segmenter, text: str, top_k: int = 10) -> list[str]:
    """Return the ``top_k`` most frequent multi-character Chinese tokens.

    Only tokens longer than one character that contain at least one CJK
    ideograph are counted. Ties keep first-occurrence order.
    """
    if top_k <= 0:
        return []

    counts = Counter(
        word for word in segmenter.cut(text) if len(word) > 1 and RE_CJK.search(word)
    )
    return [word for word, _ in counts.most_common(top_k)]
