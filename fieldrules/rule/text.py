# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Validators over text values.

Shape validators (character classes, patterns) treat empty text as valid;
combine them with :class:`NotEmptyValidator` to require input. Length
validators are the exception: they always compare the actual length.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from ..ln import ensure_at_least, ensure_not_none, ensure_type
from .base import AbstractValidator, MessageRef

__all__ = (
    "BeginsWithUppercaseLetterValidator",
    "Case",
    "EqualValidator",
    "HasText",
    "LetterOrNumberValidator",
    "LetterValidator",
    "MaxLengthValidator",
    "MinLengthValidator",
    "NoWhitespaceValidator",
    "NotEmptyValidator",
    "NumberValidator",
    "RegexValidator",
    "as_text",
    "compile_pattern",
)


def as_text(value: Any) -> str:
    return "" if value is None else str(value)


def compile_pattern(regex: str | re.Pattern, message: str) -> re.Pattern:
    ensure_not_none(regex, message)
    if isinstance(regex, re.Pattern):
        return regex
    ensure_type(regex, str, message)
    return re.compile(regex)


class Case(Enum):
    """Which letter cases a character-class validator accepts."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CASE_INSENSITIVE = "case_insensitive"


@runtime_checkable
class HasText(Protocol):
    """Anything exposing its current text, e.g. another text field."""

    @property
    def text(self) -> str: ...


class NotEmptyValidator(AbstractValidator[str]):

    def validate(self, value: str) -> bool:
        return len(as_text(value)) > 0


class MinLengthValidator(AbstractValidator[str]):
    """Passes when the text has at least ``min_length`` characters."""

    def __init__(
        self,
        error_message: str | MessageRef,
        min_length: int,
        *,
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.min_length = min_length

    @property
    def min_length(self) -> int:
        return self._min_length

    @min_length.setter
    def min_length(self, value: int) -> None:
        self._min_length = ensure_at_least(
            value, 1, "The minimum length must be at least 1"
        )

    def validate(self, value: str) -> bool:
        return len(as_text(value)) >= self._min_length


class MaxLengthValidator(AbstractValidator[str]):
    """Passes when the text has at most ``max_length`` characters."""

    def __init__(
        self,
        error_message: str | MessageRef,
        max_length: int,
        *,
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.max_length = max_length

    @property
    def max_length(self) -> int:
        return self._max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        self._max_length = ensure_at_least(
            value, 1, "The maximum length must be at least 1"
        )

    def validate(self, value: str) -> bool:
        return len(as_text(value)) <= self._max_length


class NoWhitespaceValidator(AbstractValidator[str]):

    def validate(self, value: str) -> bool:
        return " " not in as_text(value)


class RegexValidator(AbstractValidator[str]):
    """Passes when the whole text matches the pattern."""

    def __init__(
        self,
        error_message: str | MessageRef,
        regex: str | re.Pattern,
        *,
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.regex = regex

    @property
    def regex(self) -> re.Pattern:
        return self._regex

    @regex.setter
    def regex(self, value: str | re.Pattern) -> None:
        self._regex = compile_pattern(
            value, "The regular expression may not be None"
        )

    def validate(self, value: str) -> bool:
        return self._regex.fullmatch(as_text(value)) is not None


class NumberValidator(RegexValidator):
    """Only decimal digits."""

    REGEX = re.compile(r"[0-9]*")

    def __init__(
        self, error_message: str | MessageRef, *, icon: Any | None = None
    ):
        super().__init__(error_message, self.REGEX, icon=icon)


class LetterValidator(AbstractValidator[str]):
    """Only letters of the configured case.

    Characters in ``allowed_characters`` are ignored, as is whitespace when
    ``allow_spaces`` is set.
    """

    PATTERNS = {
        Case.UPPERCASE: re.compile(r"[A-Z]*"),
        Case.LOWERCASE: re.compile(r"[a-z]*"),
        Case.CASE_INSENSITIVE: re.compile(r"[a-zA-Z]*"),
    }
    _WHITESPACE = re.compile(r"\s+")

    def __init__(
        self,
        error_message: str | MessageRef,
        case_sensitivity: Case,
        allow_spaces: bool,
        *allowed_characters: str,
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.case_sensitivity = case_sensitivity
        self.allow_spaces = allow_spaces
        self.allowed_characters = allowed_characters

    @property
    def case_sensitivity(self) -> Case:
        return self._case_sensitivity

    @case_sensitivity.setter
    def case_sensitivity(self, value: Case) -> None:
        ensure_not_none(value, "The case sensitivity may not be None")
        self._case_sensitivity = ensure_type(
            value, Case, "The case sensitivity must be a Case"
        )

    @property
    def allow_spaces(self) -> bool:
        return self._allow_spaces

    @allow_spaces.setter
    def allow_spaces(self, value: bool) -> None:
        self._allow_spaces = bool(value)

    @property
    def allowed_characters(self) -> tuple[str, ...]:
        return self._allowed_characters

    @allowed_characters.setter
    def allowed_characters(self, value: Iterable[str]) -> None:
        ensure_not_none(value, "The allowed characters may not be None")
        chars = tuple(value)
        for char in chars:
            ensure_type(char, str, "The allowed characters must be strings")
        self._allowed_characters = chars

    def _strip(self, value: str) -> str:
        text = as_text(value)
        if self._allow_spaces:
            text = self._WHITESPACE.sub("", text)
        for char in self._allowed_characters:
            text = text.replace(char, "")
        return text

    def validate(self, value: str) -> bool:
        pattern = self.PATTERNS[self._case_sensitivity]
        return pattern.fullmatch(self._strip(value)) is not None


class LetterOrNumberValidator(LetterValidator):
    """Only letters of the configured case and decimal digits."""

    PATTERNS = {
        Case.UPPERCASE: re.compile(r"[A-Z0-9]*"),
        Case.LOWERCASE: re.compile(r"[a-z0-9]*"),
        Case.CASE_INSENSITIVE: re.compile(r"[a-zA-Z0-9]*"),
    }


class BeginsWithUppercaseLetterValidator(AbstractValidator[str]):

    def validate(self, value: str) -> bool:
        text = as_text(value)
        return not text or text[0].isupper() or text[0].istitle()


class EqualValidator(AbstractValidator[str]):
    """Passes when the text equals the current text of another field.

    The other field is read on every call, never cached.
    """

    def __init__(
        self,
        error_message: str | MessageRef,
        field: HasText,
        *,
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.field = field

    @property
    def field(self) -> HasText:
        return self._field

    @field.setter
    def field(self, value: HasText) -> None:
        self._field = ensure_not_none(value, "The field may not be None")

    def validate(self, value: str) -> bool:
        return as_text(value) == as_text(self._field.text)
