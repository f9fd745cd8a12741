# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Factory functions for every built-in validator.

Each factory takes the error message first, either literal text or a
:class:`~fieldrules.rule.MessageRef`. Passing ``Unset`` (the default where
the message is the only argument) uses ``settings.DEFAULT_ERROR_MESSAGE``.

Example:
    >>> from fieldrules import validators as v
    >>> username = v.conjunctive(
    ...     "Letters and digits, at least 3",
    ...     v.letter_or_number(v.Unset, v.Case.CASE_INSENSITIVE, False),
    ...     v.min_length(v.Unset, 3),
    ... )
    >>> username.validate("ab1")
    True
"""

from __future__ import annotations

import re
from typing import Any, TypeVar

from ._concepts import Validator
from .config import settings
from .ln import Unset, UnsetType
from .rule import (
    BeginsWithUppercaseLetterValidator,
    Case,
    ConjunctiveValidator,
    DisjunctiveValidator,
    DomainNameValidator,
    EmailAddressValidator,
    EqualValidator,
    HasText,
    IPv4AddressValidator,
    IPv6AddressValidator,
    IRIValidator,
    LetterOrNumberValidator,
    LetterValidator,
    MaxLengthValidator,
    MessageRef,
    MinLengthValidator,
    NegateValidator,
    NoWhitespaceValidator,
    NotEmptyValidator,
    NotNullValidator,
    NumberValidator,
    PhoneNumberValidator,
    RegexValidator,
)

V = TypeVar("V")

Message = str | MessageRef | UnsetType

__all__ = (
    "Case",
    "Unset",
    "begins_with_uppercase_letter",
    "conjunctive",
    "disjunctive",
    "domain_name",
    "email_address",
    "equal",
    "ipv4_address",
    "ipv6_address",
    "iri",
    "letter",
    "letter_or_number",
    "max_length",
    "min_length",
    "negate",
    "no_whitespace",
    "not_empty",
    "not_null",
    "number",
    "phone_number",
    "regex",
)


def _message(message: Message) -> str | MessageRef:
    if message is Unset:
        return settings.DEFAULT_ERROR_MESSAGE
    return message


def negate(message: Message, validator: Validator[V]) -> Validator[V]:
    return NegateValidator(_message(message), validator)


def conjunctive(message: Message, *validators: Validator[V]) -> Validator[V]:
    return ConjunctiveValidator(_message(message), *validators)


def disjunctive(message: Message, *validators: Validator[V]) -> Validator[V]:
    return DisjunctiveValidator(_message(message), *validators)


def not_null(message: Message = Unset) -> Validator[Any]:
    return NotNullValidator(_message(message))


def regex(message: Message, pattern: str | re.Pattern) -> Validator[str]:
    return RegexValidator(_message(message), pattern)


def not_empty(message: Message = Unset) -> Validator[str]:
    return NotEmptyValidator(_message(message))


def min_length(message: Message, length: int) -> Validator[str]:
    return MinLengthValidator(_message(message), length)


def max_length(message: Message, length: int) -> Validator[str]:
    return MaxLengthValidator(_message(message), length)


def no_whitespace(message: Message = Unset) -> Validator[str]:
    return NoWhitespaceValidator(_message(message))


def number(message: Message = Unset) -> Validator[str]:
    return NumberValidator(_message(message))


def letter(
    message: Message,
    case_sensitivity: Case = Case.CASE_INSENSITIVE,
    allow_spaces: bool = False,
    *allowed_characters: str,
) -> Validator[str]:
    return LetterValidator(
        _message(message), case_sensitivity, allow_spaces, *allowed_characters
    )


def letter_or_number(
    message: Message,
    case_sensitivity: Case = Case.CASE_INSENSITIVE,
    allow_spaces: bool = False,
    *allowed_characters: str,
) -> Validator[str]:
    return LetterOrNumberValidator(
        _message(message), case_sensitivity, allow_spaces, *allowed_characters
    )


def begins_with_uppercase_letter(message: Message = Unset) -> Validator[str]:
    return BeginsWithUppercaseLetterValidator(_message(message))


def equal(message: Message, field: HasText) -> Validator[str]:
    """The text must equal ``field.text`` at the time of validation."""
    return EqualValidator(_message(message), field)


def domain_name(message: Message = Unset) -> Validator[str]:
    return DomainNameValidator(_message(message))


def email_address(message: Message = Unset) -> Validator[str]:
    return EmailAddressValidator(_message(message))


def ipv4_address(message: Message = Unset) -> Validator[str]:
    return IPv4AddressValidator(_message(message))


def ipv6_address(message: Message = Unset) -> Validator[str]:
    return IPv6AddressValidator(_message(message))


def iri(message: Message = Unset) -> Validator[str]:
    return IRIValidator(_message(message))


def phone_number(message: Message = Unset) -> Validator[str]:
    return PhoneNumberValidator(_message(message))
