# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from .._concepts import Validator
from ..ln import ensure_not_empty, ensure_not_none
from .base import AbstractValidator, MessageRef

V = TypeVar("V")

__all__ = (
    "ConjunctiveValidator",
    "DisjunctiveValidator",
    "NegateValidator",
)


def _as_children(validators: Iterable[Validator[V]] | None) -> tuple:
    ensure_not_none(validators, "The validators may not be None")
    children = tuple(validators)
    ensure_not_empty(children, "The validators may not be empty")
    for child in children:
        ensure_not_none(child, "The validators may not contain None")
    return children


class NegateValidator(AbstractValidator[V], Generic[V]):
    """Passes exactly when the wrapped validator fails."""

    def __init__(
        self,
        error_message: str | MessageRef,
        validator: Validator[V],
        *,
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.set_validator(validator)

    @property
    def validator(self) -> Validator[V]:
        return self._validator

    def set_validator(self, validator: Validator[V]) -> None:
        self._validator = ensure_not_none(
            validator, "The validator may not be None"
        )

    def validate(self, value: V) -> bool:
        return not self._validator.validate(value)


class _CompositeValidator(AbstractValidator[V], Generic[V]):

    def __init__(
        self,
        error_message: str | MessageRef,
        *validators: Validator[V],
        icon: Any | None = None,
    ):
        super().__init__(error_message, icon=icon)
        self.set_validators(validators)

    @property
    def validators(self) -> tuple[Validator[V], ...]:
        return self._validators

    def set_validators(self, validators: Iterable[Validator[V]]) -> None:
        """Replace all children at once; the new sequence must not be empty."""
        self._validators = _as_children(validators)


class ConjunctiveValidator(_CompositeValidator[V], Generic[V]):
    """Passes when all of its validators pass."""

    def validate(self, value: V) -> bool:
        return all(v.validate(value) for v in self._validators)


class DisjunctiveValidator(_CompositeValidator[V], Generic[V]):
    """Passes when at least one of its validators passes."""

    def validate(self, value: V) -> bool:
        return any(v.validate(value) for v in self._validators)
