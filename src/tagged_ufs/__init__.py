"""Union-find sets with mergeable per-set tags."""

from .errors import DisjointSetError, DuplicateElement, UnknownElement
from .mergeable import UNIT, Mergeable, Unit
from .structures import DisjointSet, UnionStrategy
from .tagged import SetHandle, TaggedDisjointSets
from .iterable import IterableDisjointSets, IterableSetHandle, IterableTag

__all__ = [
    "DisjointSet",
    "UnionStrategy",
    "TaggedDisjointSets",
    "SetHandle",
    "IterableDisjointSets",
    "IterableSetHandle",
    "IterableTag",
    "Mergeable",
    "Unit",
    "UNIT",
    "DisjointSetError",
    "DuplicateElement",
    "UnknownElement",
]
