# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .._concepts import Validator
from ..config import settings
from ..ln import MaybeUnset, Unset, ensure_at_least, ensure_not_empty
from ..rule.text import MaxLengthValidator, as_text
from ..validation.subject import ValidatableSubject

__all__ = ("TextField",)


class TextField(ValidatableSubject[str]):
    """
    Headless text entry.

    When ``max_number_of_characters`` is set, exceeding it fails the right
    channel with the character counter (e.g. ``"12/10"``) as its message,
    independently of the validators in the left channel.
    """

    def __init__(
        self,
        text: str = "",
        *,
        max_number_of_characters: int | None = None,
        max_characters_message: MaybeUnset[str] = Unset,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self._text = as_text(text)
        self.max_characters_message = (
            settings.MAX_CHARACTERS_MESSAGE
            if max_characters_message is Unset
            else max_characters_message
        )
        self.max_number_of_characters = max_number_of_characters

    def get_value(self) -> str:
        return self._text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        self._text = as_text(value)
        self._on_text_changed()

    def _on_text_changed(self) -> None:
        self.notify_value_changed()

    @property
    def max_number_of_characters(self) -> int | None:
        return self._max_number_of_characters

    @max_number_of_characters.setter
    def max_number_of_characters(self, value: int | None) -> None:
        if value is not None:
            ensure_at_least(
                value, 1, "The maximum number of characters must be at least 1"
            )
        self._max_number_of_characters = value

    @property
    def max_characters_message(self) -> str:
        """Counter template with ``{current}`` and ``{maximum}`` fields."""
        return self._max_characters_message

    @max_characters_message.setter
    def max_characters_message(self, value: str) -> None:
        self._max_characters_message = ensure_not_empty(
            value, "The character count message may not be empty"
        )

    @property
    def character_count_message(self) -> str | None:
        """Counter text, ``None`` when the length is unlimited."""
        if self._max_number_of_characters is None:
            return None
        return self._max_characters_message.format(
            current=len(self._text), maximum=self._max_number_of_characters
        )

    def _right_channel_validators(self) -> Iterable[Validator[str]]:
        if self._max_number_of_characters is None:
            return ()
        return (
            MaxLengthValidator(
                self.character_count_message, self._max_number_of_characters
            ),
        )
