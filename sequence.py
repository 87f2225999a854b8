# sequence.py
# Immutable stack-shaped sequence with a shared tail, so search branches can
# hold on to their own view of the keys without copying.

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Sequence(Generic[T]):
    """
    Persistent singly-linked stack:
      - Sequence.EMPTY is the shared empty sequence
      - push(value) -> new Sequence, the receiver is never touched
      - iteration runs from the last pushed value to the first (LIFO)
      - ordering is element-wise over that iteration order, then by length
    """

    __slots__ = ("_value", "_next", "_count")

    EMPTY: "Sequence"

    def __init__(self, value: T, next_: "Sequence[T]"):
        if not isinstance(next_, Sequence):
            raise TypeError("a sequence is built by pushing onto Sequence.EMPTY")
        self._value = value
        self._next = next_
        self._count = next_._count + 1

    @classmethod
    def _empty(cls) -> "Sequence":
        s = object.__new__(cls)
        s._value = None
        s._next = None
        s._count = 0
        return s

    # ---------- Public API ----------
    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "Sequence[T]":
        """Push every value in order; the last one ends up on top."""
        s = cls.EMPTY
        for v in values:
            s = s.push(v)
        return s

    def push(self, value: T) -> "Sequence[T]":
        return Sequence(value, self)

    @property
    def value(self) -> T:
        if self._next is None:
            raise IndexError("value of empty sequence")
        return self._value

    @property
    def next(self) -> "Sequence[T]":
        if self._next is None:
            raise IndexError("next of empty sequence")
        return self._next

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[T]:
        s = self
        while s._next is not None:
            yield s._value
            s = s._next

    def compare_to(self, other: "Sequence[T]") -> int:
        for a, b in zip(self, other):
            if a < b:
                return -1
            if b < a:
                return 1
        return self._count - other._count

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"Sequence({list(self)!r})"


Sequence.EMPTY = Sequence._empty()
