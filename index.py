# index.py
# Builds the signature index: every word hangs off the trie path spelled by
# its letters in ascending order.

import time
from typing import Iterable, List, NamedTuple, Tuple

from trie import SignatureTrie
from utils import vlog

WordGroup = List[str]


class IndexStats(NamedTuple):
    words: int
    signatures: int
    nodes: int


def signature(word: str) -> Tuple[str, ...]:
    """Sorted letters of ``word``; anagrams share one signature."""
    return tuple(sorted(word))


def build_index(words: Iterable[str]) -> SignatureTrie:
    """
    Group ``words`` by signature. Words keep their dictionary order inside a
    group and duplicates are kept. Empty words are rejected: a zero-length
    signature would sit on the root and let the search loop forever when no
    minimum word length applies.
    """
    t0 = time.time()
    root: SignatureTrie = SignatureTrie()
    count = 0
    for word in words:
        if not word:
            raise ValueError("cannot index an empty word")
        node = root.get_or_create_descendant(signature(word))
        if node.value is None:
            node.value = []
        node.value.append(word)
        count += 1
    vlog(f"Indexed {count} words", t0)
    return root


def index_stats(root: SignatureTrie) -> IndexStats:
    words = signatures = nodes = 0
    for node in root:
        nodes += 1
        if node.value is not None:
            signatures += 1
            words += len(node.value)
    return IndexStats(words, signatures, nodes)
