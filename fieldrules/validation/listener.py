# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .._concepts import Validator

if TYPE_CHECKING:
    from .subject import ValidatableSubject

V = TypeVar("V")

__all__ = (
    "CallbackListener",
    "ValidationListener",
)


class ValidationListener(Generic[V]):
    """Receives the outcome of every ``validate()`` call of a subject.

    Both hooks are no-ops by default; override the ones you need.
    """

    def on_validation_success(self, subject: ValidatableSubject[V]) -> None:
        """Called once when every validator of both channels passed."""

    def on_validation_failure(
        self, subject: ValidatableSubject[V], validator: Validator[V]
    ) -> None:
        """Called for each failing validator, not only the reported one."""


class CallbackListener(ValidationListener[V]):
    """Adapts plain callables to :class:`ValidationListener`."""

    def __init__(
        self,
        on_success: Callable[[Any], None] | None = None,
        on_failure: Callable[[Any, Validator[V]], None] | None = None,
    ):
        self._on_success = on_success
        self._on_failure = on_failure

    def on_validation_success(self, subject):
        if self._on_success is not None:
            self._on_success(subject)

    def on_validation_failure(self, subject, validator):
        if self._on_failure is not None:
            self._on_failure(subject, validator)
