# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Factory functions for the built-in constraints."""

from __future__ import annotations

import re
from typing import TypeVar

from ._concepts import Constraint
from .constraint import (
    ConjunctiveConstraint,
    ContainsLetterConstraint,
    ContainsNumberConstraint,
    ContainsSymbolConstraint,
    DisjunctiveConstraint,
    MinLengthConstraint,
    NegateConstraint,
    RegexConstraint,
)

V = TypeVar("V")

__all__ = (
    "conjunctive",
    "contains_letter",
    "contains_number",
    "contains_symbol",
    "disjunctive",
    "min_length",
    "negate",
    "regex",
)


def negate(constraint: Constraint[V]) -> Constraint[V]:
    return NegateConstraint(constraint)


def conjunctive(*constraints: Constraint[V]) -> Constraint[V]:
    return ConjunctiveConstraint(*constraints)


def disjunctive(*constraints: Constraint[V]) -> Constraint[V]:
    return DisjunctiveConstraint(*constraints)


def regex(pattern: str | re.Pattern) -> Constraint[str]:
    return RegexConstraint(pattern)


def min_length(length: int) -> Constraint[str]:
    return MinLengthConstraint(length)


def contains_number() -> Constraint[str]:
    return ContainsNumberConstraint()


def contains_letter() -> Constraint[str]:
    return ContainsLetterConstraint()


def contains_symbol() -> Constraint[str]:
    return ContainsSymbolConstraint()
