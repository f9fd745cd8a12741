# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""
Insertion-ordered collection keyed by identity.

Backs the validators and listeners of a subject and the constraints of a
password strength scorer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from ..ln import ensure_not_none

T = TypeVar("T")

__all__ = ("RuleBook",)


class RuleBook(Generic[T]):
    """
    Ordered set of entries compared by ``is``, not ``==``.

    Adding an entry that is already present and removing one that is not
    are both no-ops. Iteration walks a snapshot, so entries may be added or
    removed while iterating.
    """

    def __init__(self, items: Iterable[T] | None = None, *, label: str = "rule"):
        """
        Args:
            items: Initial entries, added in order.
            label: Noun used in error messages, e.g. ``"validator"``.
        """
        self.label = label
        self._items: dict[int, T] = {}
        if items is not None:
            self.add_all(items)

    def add(self, item: T) -> bool:
        """Append ``item`` unless present. Returns whether it was added."""
        ensure_not_none(item, f"The {self.label} may not be None")
        key = id(item)
        if key in self._items:
            return False
        self._items[key] = item
        return True

    def add_all(self, items: Iterable[T]) -> None:
        ensure_not_none(items, "The collection may not be None")
        for item in tuple(items):
            self.add(item)

    def remove(self, item: T) -> bool:
        """Remove ``item`` if present. Returns whether it was removed."""
        ensure_not_none(item, f"The {self.label} may not be None")
        return self._items.pop(id(item), None) is not None

    def remove_all(self, items: Iterable[T]) -> None:
        ensure_not_none(items, "The collection may not be None")
        for item in tuple(items):
            self.remove(item)

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> tuple[T, ...]:
        """All entries in insertion order, detached from the book."""
        return tuple(self._items.values())

    def __contains__(self, item: object) -> bool:
        return id(item) in self._items and self._items[id(item)] is item

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        """Number of entries in the book."""
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"RuleBook({list(self._items.values())!r})"
