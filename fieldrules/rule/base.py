# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .._concepts import TextResolver, Validator
from .._errors import InvalidArgumentError
from ..ln import ensure_not_empty, ensure_not_none, is_absent

V = TypeVar("V")

__all__ = (
    "AbstractValidator",
    "MessageRef",
    "NotNullValidator",
    "resolve_message",
)


@dataclass(frozen=True, slots=True)
class MessageRef:
    """A message identified by key inside a text catalog.

    ``resources`` is either a :class:`TextResolver` or a plain mapping.
    """

    resources: TextResolver | Mapping[Any, str]
    key: Any


def resolve_message(message: str | MessageRef | None) -> str | None:
    """Turn a literal message or a :class:`MessageRef` into display text."""
    if not isinstance(message, MessageRef):
        return message

    resources = ensure_not_none(
        message.resources, "The resources may not be None"
    )
    if isinstance(resources, TextResolver):
        return resources.get_text(message.key)
    try:
        return resources[message.key]
    except KeyError as e:
        raise InvalidArgumentError.from_value(
            message.key,
            message=f"Unknown message key: {message.key!r}",
            cause=e,
        ) from e


class AbstractValidator(Validator[V], Generic[V]):
    """Holds the error message and icon shared by all validators.

    Validators are compared by identity: two instances with the same
    message are still distinct entries of a rule set.
    """

    def __init__(
        self, error_message: str | MessageRef, *, icon: Any | None = None
    ):
        self.set_error_message(error_message)
        self._icon = icon

    @property
    def error_message(self) -> str:
        return self._error_message

    @error_message.setter
    def error_message(self, value: str | MessageRef) -> None:
        self.set_error_message(value)

    def set_error_message(self, error_message: str | MessageRef) -> None:
        text = resolve_message(
            ensure_not_none(error_message, "The error message may not be None")
        )
        self._error_message = str(
            ensure_not_empty(text, "The error message may not be empty")
        )

    @property
    def icon(self) -> Any | None:
        return self._icon

    @icon.setter
    def icon(self, value: Any | None) -> None:
        self._icon = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(error_message={self._error_message!r})"


class NotNullValidator(AbstractValidator[Any]):
    """Fails for ``None`` and for the library's absent sentinels."""

    def validate(self, value: Any) -> bool:
        return not is_absent(value)
