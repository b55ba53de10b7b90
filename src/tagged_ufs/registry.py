"""Mapping between element identifiers and dense indices."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

from .errors import DuplicateElement, UnknownElement

K = TypeVar("K", bound=Hashable)


class ElementRegistry(Generic[K]):
    """Assign each element a dense index on first registration.

    Indices start at zero, grow by one per element and are never reused.
    """

    __slots__ = ("_elements", "_indexes_by_element")

    def __init__(self) -> None:
        self._elements: List[K] = []
        self._indexes_by_element: Dict[K, int] = {}

    def register(self, element: K) -> int:
        if element in self._indexes_by_element:
            raise DuplicateElement(element)
        index = len(self._elements)
        self._elements.append(element)
        self._indexes_by_element[element] = index
        return index

    def index_of(self, element: K) -> int:
        try:
            return self._indexes_by_element[element]
        except KeyError:
            raise UnknownElement(element) from None

    def element_at(self, index: int) -> K:
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._indexes_by_element
        except TypeError:
            # unhashable values can never have been registered
            return False

    def __iter__(self) -> Iterator[K]:
        return iter(self._elements)


__all__ = ["ElementRegistry"]
