"""Raw union-find structure: identity, union and cardinality only."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Hashable, Iterator, List, Tuple, TypeVar

from .registry import ElementRegistry

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class UnionStrategy(str, Enum):
    """Heuristic used to pick the surviving root of a union."""

    SIZE = "size"
    RANK = "rank"


@dataclass(eq=False)
class DisjointSet(Generic[K]):
    """Union-find forest with path compression and balanced union.

    Elements are registered once with :meth:`make_set` and addressed by their
    identifiers; internally every element is a dense index and the forest is
    kept in flat lists. Set sizes are tracked under both strategies because
    :meth:`set_len` needs them.

    ``find`` rewrites parent pointers, so even lookups count as mutations when
    the structure is shared between threads.
    """

    union_by: UnionStrategy = UnionStrategy.SIZE
    registry: ElementRegistry[K] = field(default_factory=ElementRegistry, repr=False)

    def __post_init__(self) -> None:
        try:
            self.union_by = UnionStrategy(self.union_by)
        except ValueError:
            choices = ", ".join(strategy.value for strategy in UnionStrategy)
            raise ValueError(f"union_by must be one of: {choices}") from None
        if len(self.registry):
            raise ValueError("registry must be empty")
        self.parent: List[int] = []
        self.size: List[int] = []
        self.rank: List[int] = []
        self._count = 0
        logger.debug("Created disjoint set (union_by=%s)", self.union_by.value)

    def make_set(self, element: K) -> int:
        """Register `element` as a new singleton set and return its index."""

        index = self.registry.register(element)
        self.parent.append(index)
        self.size.append(1)
        self.rank.append(0)
        self._count += 1
        return index

    def find(self, element: K) -> int:
        """Return the root index of the set containing `element`."""

        return self.find_index(self.registry.index_of(element))

    def find_index(self, index: int) -> int:
        parent = self.parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def unite(self, left: K, right: K) -> Tuple[int, int]:
        """Merge the sets of `left` and `right`.

        Returns ``(winner, loser)`` root indices. When both elements already
        share a set nothing changes and the common root is returned twice.
        On a tie the root of `left` stays on top.
        """

        left_index = self.registry.index_of(left)
        right_index = self.registry.index_of(right)
        winner = self.find_index(left_index)
        loser = self.find_index(right_index)
        if winner == loser:
            return winner, winner

        if self.union_by is UnionStrategy.SIZE:
            if self.size[loser] > self.size[winner]:
                winner, loser = loser, winner
        else:
            if self.rank[loser] > self.rank[winner]:
                winner, loser = loser, winner
            elif self.rank[loser] == self.rank[winner]:
                self.rank[winner] += 1

        self.parent[loser] = winner
        self.size[winner] += self.size[loser]
        self._count -= 1
        return winner, loser

    def set_len(self, element: K) -> int:
        """Return the number of elements in the set containing `element`."""

        return self.size[self.find(element)]

    def same_set(self, left: K, right: K) -> bool:
        left_index = self.registry.index_of(left)
        right_index = self.registry.index_of(right)
        return self.find_index(left_index) == self.find_index(right_index)

    def roots(self) -> Iterator[int]:
        """Yield the root index of every live set."""

        for index, parent in enumerate(self.parent):
            if index == parent:
                yield index

    def element_at(self, index: int) -> K:
        return self.registry.element_at(index)

    @property
    def element_count(self) -> int:
        return len(self.registry)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, element: object) -> bool:
        return element in self.registry


__all__ = ["DisjointSet", "UnionStrategy"]
