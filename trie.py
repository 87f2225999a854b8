# trie.py
# Ordered tree of optional payloads keyed by sequences of keys.
# Every node is itself a SignatureTrie, so a lookup can hand back a subtree.

from typing import Dict, Generic, Iterable, Iterator, NamedTuple, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ChildLookup(NamedTuple):
    """Result of try_get_child: ``node`` is the child when found, else the node asked."""
    found: bool
    node: "SignatureTrie"


class SignatureTrie(Generic[K, V]):
    """
    Trie with the API the anagram search needs:
      - value: optional payload, set and read by callers
      - try_get_child(key) -> ChildLookup(found, node)
      - get_or_create_descendant(keys) -> SignatureTrie
      - children() -> Iterable[(key, SignatureTrie)] in ascending key order
    Internals:
      _children is None until the first child is attached.
    """

    __slots__ = ("value", "_children")

    def __init__(self, value: Optional[V] = None):
        self.value = value
        self._children: Optional[Dict[K, "SignatureTrie[K, V]"]] = None

    # ---------- Public API ----------
    def try_get_child(self, key: K) -> ChildLookup:
        children = self._children
        if children is not None:
            child = children.get(key)
            if child is not None:
                return ChildLookup(True, child)
        return ChildLookup(False, self)

    def get_or_create_descendant(self, keys: Iterable[K]) -> "SignatureTrie[K, V]":
        """
        Follow existing children for as long as they exist, then attach
        fresh empty nodes for the rest of ``keys``.
        """
        node = self
        walking = True
        for key in keys:
            if walking:
                found, child = node.try_get_child(key)
                if found:
                    node = child
                    continue
                walking = False
            node = node._attach(key)
        return node

    def children(self) -> Iterator[Tuple[K, "SignatureTrie[K, V]"]]:
        if not self._children:
            return
        for key in sorted(self._children):
            yield key, self._children[key]

    def __iter__(self) -> Iterator["SignatureTrie[K, V]"]:
        """Yield every node, root first, depth-first in key order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node._children:
                stack.extend(child for _, child in reversed(list(node.children())))

    # ---------- Helpers ----------
    def _attach(self, key: K) -> "SignatureTrie[K, V]":
        child = SignatureTrie()
        if self._children is None:
            self._children = {key: child}
        else:
            self._children[key] = child
        return child
