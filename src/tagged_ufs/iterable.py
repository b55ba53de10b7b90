"""Member tracking built on top of the mergeable tag protocol."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterable, Iterator, List, TypeVar

from .mergeable import UNIT, Mergeable
from .tagged import SetHandle, TaggedDisjointSets

K = TypeVar("K", bound=Hashable)
T = TypeVar("T", bound=Mergeable)


class IterableTag(Generic[K, T]):
    """Tag holding the members of a set next to an optional user tag.

    Merging appends the absorbed members, which is proportional to the
    smaller set when the structure unions by size.
    """

    __slots__ = ("members", "tag")

    def __init__(self, members: Iterable[K], tag: T = UNIT) -> None:
        self.members: List[K] = list(members)
        self.tag = tag

    @classmethod
    def singleton(cls, element: K, tag: T = UNIT) -> IterableTag[K, T]:
        return cls([element], tag)

    def merge(self, other: IterableTag[K, T]) -> IterableTag[K, T]:
        self.members.extend(other.members)
        self.tag = self.tag.merge(other.tag)
        return self

    def __iter__(self) -> Iterator[K]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, element: object) -> bool:
        return element in self.members

    def __repr__(self) -> str:
        return f"IterableTag(members={self.members!r}, tag={self.tag!r})"


class IterableSetHandle(SetHandle[K, T]):
    """Handle whose tag is the user tag and whose iteration yields members."""

    __slots__ = ()

    @property
    def tag(self) -> Any:
        return self._tag.tag

    def __iter__(self) -> Iterator[K]:
        return iter(self._tag)

    def __contains__(self, element: object) -> bool:
        return element in self._tag


class IterableDisjointSets(TaggedDisjointSets[K, T]):
    """Tagged disjoint sets that can also list the elements of every set.

    Each user tag is wrapped in an :class:`IterableTag` at ``make_set`` time;
    the tagged layer merges it like any other tag.
    """

    handle_class = IterableSetHandle

    def make_set(self, element: K, tag: T = UNIT) -> None:
        super().make_set(element, IterableTag.singleton(element, tag))

    def groups(self) -> List[List[K]]:
        """Return the members of every set as lists."""

        return [list(handle) for handle in self.iter()]


__all__ = ["IterableTag", "IterableSetHandle", "IterableDisjointSets"]
