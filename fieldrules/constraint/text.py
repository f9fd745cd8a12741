# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Constraints over text, used to score password strength."""

from __future__ import annotations

import re

from .._concepts import Constraint
from ..ln import ensure_at_least
from ..rule.text import as_text, compile_pattern

__all__ = (
    "ContainsLetterConstraint",
    "ContainsNumberConstraint",
    "ContainsSymbolConstraint",
    "MinLengthConstraint",
    "RegexConstraint",
)


class RegexConstraint(Constraint[str]):
    """Satisfied when the whole text matches the pattern."""

    def __init__(self, regex: str | re.Pattern):
        self.regex = regex

    @property
    def regex(self) -> re.Pattern:
        return self._regex

    @regex.setter
    def regex(self, value: str | re.Pattern) -> None:
        self._regex = compile_pattern(
            value, "The regular expression may not be None"
        )

    def is_satisfied(self, value: str) -> bool:
        return self._regex.fullmatch(as_text(value)) is not None


class MinLengthConstraint(Constraint[str]):

    def __init__(self, min_length: int):
        self.min_length = min_length

    @property
    def min_length(self) -> int:
        return self._min_length

    @min_length.setter
    def min_length(self, value: int) -> None:
        self._min_length = ensure_at_least(
            value, 1, "The minimum length must be at least 1"
        )

    def is_satisfied(self, value: str) -> bool:
        return len(as_text(value)) >= self._min_length


class ContainsLetterConstraint(RegexConstraint):
    REGEX = re.compile(r".*[a-zA-Z].*", re.DOTALL)

    def __init__(self):
        super().__init__(self.REGEX)


class ContainsNumberConstraint(RegexConstraint):
    REGEX = re.compile(r".*[0-9].*", re.DOTALL)

    def __init__(self):
        super().__init__(self.REGEX)


class ContainsSymbolConstraint(RegexConstraint):
    """At least one character that is neither an ASCII letter nor a digit."""

    REGEX = re.compile(r".*[^a-zA-Z0-9].*", re.DOTALL)

    def __init__(self):
        super().__init__(self.REGEX)
