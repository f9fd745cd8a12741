# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Argument guards shared by rules, constraints and subjects.

Each guard raises :class:`InvalidArgumentError` and returns the checked
value so it can be used inline in setters.
"""

from collections.abc import Iterable, Sized
from typing import Any, TypeVar

from .._errors import InvalidArgumentError
from .types import is_absent

T = TypeVar("T")

__all__ = (
    "ensure_at_least",
    "ensure_not_empty",
    "ensure_not_none",
    "ensure_type",
    "to_items",
)


def ensure_not_none(value: T, message: str) -> T:
    if is_absent(value):
        raise InvalidArgumentError.from_value(
            value, expected="not None", message=message
        )
    return value


def ensure_not_empty(value: T, message: str) -> T:
    """Reject absent values and values of length zero."""
    ensure_not_none(value, message)
    if isinstance(value, Sized) and len(value) == 0:
        raise InvalidArgumentError.from_value(
            value, expected="non-empty", message=message
        )
    return value


def ensure_at_least(value: int, minimum: int, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError.from_value(
            value, expected="int", message=message
        )
    if value < minimum:
        raise InvalidArgumentError.from_value(
            value, expected=f">= {minimum}", message=message
        )
    return value


def ensure_type(value: Any, types: type | tuple[type, ...], message: str):
    if not isinstance(value, types):
        raise InvalidArgumentError.from_value(
            value,
            expected=getattr(types, "__name__", str(types)),
            message=message,
        )
    return value


def to_items(args: tuple, message: str) -> tuple:
    """Accept either varargs or a single iterable, as ``add_all(*xs)`` does.

    Strings are treated as single items, never as iterables of characters.
    """
    if len(args) == 1 and not isinstance(args[0], (str, bytes)):
        candidate = ensure_not_none(args[0], message)
        if isinstance(candidate, Iterable):
            return tuple(candidate)
    return args
