"""Protocol for metadata that can be combined when two sets are united."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", bound="Mergeable")


@runtime_checkable
class Mergeable(Protocol):
    """Tag attached to the root of a set.

    ``merge`` receives the tag of the absorbed set and returns the combined
    tag, which replaces the surviving tag. Mutable tags may update ``self``
    in place and return it; immutable tags return a new value. The absorbed
    tag must not be used afterwards.

    The combined tag of a set must not depend on the order in which its
    elements were united.
    """

    def merge(self: T, other: T) -> T:
        ...


class Unit:
    """Tag that carries no data."""

    __slots__ = ()
    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def merge(self, other: Unit) -> Unit:
        return self

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()


__all__ = ["Mergeable", "Unit", "UNIT"]
