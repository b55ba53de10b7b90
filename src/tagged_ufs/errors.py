"""Exceptions raised by the disjoint-set structures."""

from __future__ import annotations

from typing import Hashable


class DisjointSetError(Exception):
    """Base class for errors about a specific element."""

    def __init__(self, element: Hashable, message: str) -> None:
        super().__init__(message)
        self.element = element

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownElement(DisjointSetError, KeyError):
    """Raised when an element was never passed to ``make_set``."""

    def __init__(self, element: Hashable) -> None:
        super().__init__(element, f"Element {element!r} not found in disjoint set")


class DuplicateElement(DisjointSetError, ValueError):
    """Raised when ``make_set`` is called twice with the same element."""

    def __init__(self, element: Hashable) -> None:
        super().__init__(element, f"Element {element!r} already exists in disjoint set")


__all__ = ["DisjointSetError", "UnknownElement", "DuplicateElement"]
