"""Disjoint sets carrying a mergeable tag per set."""

from __future__ import annotations

from typing import Any, Dict, Generic, Hashable, Iterator, TypeVar

from .mergeable import UNIT, Mergeable
from .structures import DisjointSet, UnionStrategy

K = TypeVar("K", bound=Hashable)
T = TypeVar("T", bound=Mergeable)


class SetHandle(Generic[K, T]):
    """Snapshot of one set as seen by :meth:`TaggedDisjointSets.find`.

    Holds the root index, cardinality and a reference to the tag at the time
    of the call. Any later ``make_set``, ``unite`` or ``find`` on the owning
    structure may leave the snapshot stale.
    """

    __slots__ = ("_owner", "_root", "_size", "_tag")

    def __init__(self, owner: TaggedDisjointSets[K, T], root: int, size: int, tag: T) -> None:
        self._owner = owner
        self._root = root
        self._size = size
        self._tag = tag

    @property
    def root(self) -> int:
        return self._root

    @property
    def key(self) -> K:
        """Representative element of the set."""

        return self._owner.raw.element_at(self._root)

    @property
    def tag(self) -> Any:
        return self._tag

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        # only iterable tags such as IterableTag know their members
        return iter(self._tag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetHandle):
            return NotImplemented
        return self._owner is other._owner and self._root == other._root

    def __hash__(self) -> int:
        return hash((id(self._owner), self._root))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, size={self._size}, tag={self.tag!r})"


class TaggedDisjointSets(Generic[K, T]):
    """Union-find sets whose roots each carry a :class:`Mergeable` tag.

    Tags are stored in a dict keyed by root index, so absorbed roots have no
    tag at all. Iterating over the sets while calling ``make_set`` or
    ``unite`` raises ``RuntimeError``.
    """

    handle_class = SetHandle

    def __init__(self, union_by: UnionStrategy | str = UnionStrategy.SIZE) -> None:
        self.raw: DisjointSet[K] = DisjointSet(union_by=union_by)
        self._tags: Dict[int, T] = {}

    def make_set(self, element: K, tag: T = UNIT) -> None:
        index = self.raw.make_set(element)
        self._tags[index] = tag

    def find(self, element: K) -> SetHandle[K, T]:
        root = self.raw.find(element)
        return self._handle(root)

    def unite(self, left: K, right: K) -> bool:
        """Merge the sets of `left` and `right`.

        Returns ``False`` when they already share a set, in which case no tag
        is touched.
        """

        winner, loser = self.raw.unite(left, right)
        if winner == loser:
            return False
        absorbed = self._tags.pop(loser)
        self._tags[winner] = self._tags[winner].merge(absorbed)
        return True

    def same_set(self, left: K, right: K) -> bool:
        return self.raw.same_set(left, right)

    def iter(self) -> Iterator[SetHandle[K, T]]:
        """Yield a handle for every live set."""

        for root in self._tags:
            yield self._handle(root)

    def __iter__(self) -> Iterator[SetHandle[K, T]]:
        return self.iter()

    def __len__(self) -> int:
        return len(self.raw)

    def __contains__(self, element: object) -> bool:
        return element in self.raw

    @property
    def element_count(self) -> int:
        return self.raw.element_count

    def _handle(self, root: int) -> SetHandle[K, T]:
        return self.handle_class(self, root, self.raw.size[root], self._tags[root])


__all__ = ["SetHandle", "TaggedDisjointSets"]
