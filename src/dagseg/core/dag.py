"""DAG of candidate word ends for a sentence."""

from .dictionary import Dictionary

DAG = dict[int, list[int]]


def build_dag(dictionary: Dictionary, sentence: str) -> DAG:
    """Map every offset to the ends of dictionary words starting there.

    For start ``i`` the list holds every ``j`` such that ``sentence[i:j + 1]``
    ends on a terminal trie node, in ascending order. Offsets where no word
    starts get ``[i]`` so that every character stays reachable.

    The walk keeps a start ``i`` and a scan position ``j`` and follows the
    trie from the root; a character with no child abandons the prefix and
    restarts one position after ``i``.
    """
    n = len(sentence)
    ends: DAG = {}
    root = dictionary.root
    node = root
    i = j = 0

    while i < n:
        nxt = node.child(sentence[j])
        if nxt is not None:
            node = nxt
            if node.terminal:
                ends.setdefault(i, []).append(j)
            j += 1
            if j >= n:
                i += 1
                j = i
                node = root
        else:
            node = root
            i += 1
            j = i

    # j only grows for a fixed i, so each list is already ascending
    return {k: ends.get(k, [k]) for k in range(n)}
