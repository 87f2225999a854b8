# search.py
# Backtracking multi-word anagram search over the signature index.

from typing import Iterable, Iterator, NamedTuple, Optional, Tuple

from index import WordGroup
from sequence import Sequence
from trie import SignatureTrie

Solution = Tuple[WordGroup, ...]

EMPTY = Sequence.EMPTY


class _Frame(NamedTuple):
    node: SignatureTrie
    remaining: Sequence       # keys still to look at, smallest on top
    deferred: Sequence        # keys left for a later word, largest on top
    matched: Sequence         # keys spelled by the current word, largest on top
    prev_signature: Sequence  # signature of the last accepted word
    prev_groups: Sequence     # accepted word groups, last one on top


class AnagramEngine:
    """Enumerates the ways to split a bag of letters into indexed words.

    Each solution is a tuple of word groups (all dictionary words sharing one
    signature) whose signatures add up to the query exactly. Groups appear in
    non-decreasing signature order, which is what keeps permutations of the
    same words from being reported twice.

    The groups are the index's own lists, shared by every solution and every
    engine over that index: read them, do not modify them.

    ``min_signature_length`` drops shorter words from the decomposition,
    ``max_word_count`` caps the number of groups per solution (None means no
    cap). The index is only read, so one index can serve many engines.
    """

    def __init__(self, index: SignatureTrie, min_signature_length: int = 1,
                 max_word_count: Optional[int] = None):
        if min_signature_length < 1:
            raise ValueError(f"min_signature_length must be >= 1, got {min_signature_length}")
        if max_word_count is not None and max_word_count < 1:
            raise ValueError(f"max_word_count must be >= 1, got {max_word_count}")
        self.index = index
        self.min_signature_length = min_signature_length
        self.max_word_count = max_word_count

    def anagram(self, letters: Iterable[str]) -> Iterator[Solution]:
        """Lazily yield every solution for ``letters``; an empty query has none."""
        keys = sorted(letters, reverse=True)
        if not keys:
            return
        for groups in self._anagram(Sequence.from_iterable(keys)):
            yield tuple(reversed(list(groups)))

    def _start(self, remaining: Sequence, prev_signature: Sequence, prev_groups: Sequence) -> _Frame:
        return _Frame(self.index, remaining, EMPTY, EMPTY, prev_signature, prev_groups)

    def _anagram(self, remaining: Sequence) -> Iterator[Sequence]:
        # One stack serves every word of a solution: the frames of the next
        # word go on top of the frames still pending for the current one, so
        # the search depth never touches the Python call stack.
        stack = [self._start(remaining, EMPTY, EMPTY)]
        while stack:
            frame = stack.pop()
            node, remaining, deferred, matched = frame[:4]

            if remaining:
                k = remaining.value
                rest = remaining.next
                # A duplicate of a deferred key may not start a match again.
                if not deferred or deferred.value < k:
                    found, child = node.try_get_child(k)
                    if found:
                        stack.append(frame._replace(node=child, remaining=rest, matched=matched.push(k)))
                    elif not matched:
                        # No signature starts with the smallest key. This is
                        # the first frame of its word, so nothing else of that
                        # word is left on the stack.
                        continue
                # The word with the smallest signature holds the smallest key,
                # so a word may only skip keys once it has started.
                if matched:
                    stack.append(frame._replace(remaining=rest, deferred=deferred.push(k)))

            elif node.value is not None:
                signature = Sequence.from_iterable(matched)
                if len(signature) < self.min_signature_length or signature < frame.prev_signature:
                    continue
                groups = frame.prev_groups.push(node.value)
                if not deferred:
                    yield groups
                elif self.max_word_count is None or len(groups) < self.max_word_count:
                    # deferred holds its largest key on top, so pushing it
                    # again puts the smallest on top.
                    stack.append(self._start(Sequence.from_iterable(deferred), signature, groups))


def query(index: SignatureTrie, letters: Iterable[str], min_signature_length: int = 1,
          max_word_count: Optional[int] = None) -> Iterator[Solution]:
    return AnagramEngine(index, min_signature_length, max_word_count).anagram(letters)
