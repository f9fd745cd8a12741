# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from .._concepts import Constraint
from ..ln import ensure_not_empty, ensure_not_none

V = TypeVar("V")

__all__ = (
    "ConjunctiveConstraint",
    "DisjunctiveConstraint",
    "NegateConstraint",
)


class NegateConstraint(Constraint[V], Generic[V]):

    def __init__(self, constraint: Constraint[V]):
        self.set_constraint(constraint)

    @property
    def constraint(self) -> Constraint[V]:
        return self._constraint

    def set_constraint(self, constraint: Constraint[V]) -> None:
        self._constraint = ensure_not_none(
            constraint, "The constraint may not be None"
        )

    def is_satisfied(self, value: V) -> bool:
        return not self._constraint.is_satisfied(value)


class _CompositeConstraint(Constraint[V], Generic[V]):

    def __init__(self, *constraints: Constraint[V]):
        self.set_constraints(constraints)

    @property
    def constraints(self) -> tuple[Constraint[V], ...]:
        return self._constraints

    def set_constraints(self, constraints: Iterable[Constraint[V]]) -> None:
        ensure_not_none(constraints, "The constraints may not be None")
        children = tuple(constraints)
        ensure_not_empty(children, "The constraints may not be empty")
        for child in children:
            ensure_not_none(child, "The constraints may not contain None")
        self._constraints = children


class ConjunctiveConstraint(_CompositeConstraint[V], Generic[V]):
    """Satisfied when all of its constraints are."""

    def is_satisfied(self, value: V) -> bool:
        return all(c.is_satisfied(value) for c in self._constraints)


class DisjunctiveConstraint(_CompositeConstraint[V], Generic[V]):
    """Satisfied when at least one of its constraints is."""

    def is_satisfied(self, value: V) -> bool:
        return any(c.is_satisfied(value) for c in self._constraints)
