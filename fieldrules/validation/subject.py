# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import chain
from typing import Any, Generic, TypeVar

from .._concepts import Validateable, Validator
from ..config import settings
from ..ln import MaybeUnset, Unset, to_items
from .listener import ValidationListener
from .rulebook import RuleBook
from .state import SavedState

V = TypeVar("V")

logger = logging.getLogger(__name__)

__all__ = (
    "ValidatableSubject",
    "ValidationResult",
    "ValidationState",
)


class ValidationState(Enum):
    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[V]):
    """Outcome of one ``validate()`` call."""

    valid: bool
    left: Validator[V] | None = None
    """First failing validator of the left channel."""
    right: Validator[V] | None = None
    """First failing validator of the right channel."""
    failures: tuple[Validator[V], ...] = ()
    """Every failing validator, left channel first."""

    @property
    def error_message(self) -> str | None:
        return self.left.error_message if self.left is not None else None


class ValidatableSubject(Validateable[V], Generic[V]):
    """
    A value holder validated against an ordered set of validators.

    The subject has two message slots. The left one shows the first failing
    validator of the rule set (or the helper text when nothing failed); the
    right one is fed by subject-specific checks such as a character limit.
    Both channels are evaluated on every ``validate()`` call and the subject
    is valid only if neither produced a failure.

    Examples:
        >>> from fieldrules import validators as v
        >>> email = {"value": ""}
        >>> subject = ValidatableSubject(lambda: email["value"])
        >>> subject.add_all_validators(v.not_empty("Required"), v.email_address("Invalid"))
        >>> subject.validate()
        False
        >>> subject.error
        'Required'
    """

    def __init__(
        self,
        value_getter: Callable[[], V] | None = None,
        *,
        helper_text: str | None = None,
        validate_on_value_change: MaybeUnset[bool] = Unset,
        validate_on_focus_lost: MaybeUnset[bool] = Unset,
        enabled: bool = True,
    ):
        """
        Args:
            value_getter: Returns the current value. Subclasses that override
                :meth:`get_value` may omit it.
            helper_text: Shown in the left slot while no error is shown.
            validate_on_value_change: Defaults to
                ``settings.VALIDATE_ON_VALUE_CHANGE``.
            validate_on_focus_lost: Defaults to
                ``settings.VALIDATE_ON_FOCUS_LOST``.
            enabled: Disabled subjects never show an error.
        """
        self._value_getter = value_getter
        self._validators: RuleBook[Validator[V]] = RuleBook(label="validator")
        self._listeners: RuleBook[ValidationListener[V]] = RuleBook(
            label="listener"
        )
        self._helper_text = helper_text
        self._error: str | None = None
        self._error_icon: Any | None = None
        self._right_message: str | None = None
        self._state = ValidationState.UNVALIDATED
        self._last_result: ValidationResult[V] | None = None
        self._enabled = bool(enabled)
        self.validate_on_value_change = (
            settings.VALIDATE_ON_VALUE_CHANGE
            if validate_on_value_change is Unset
            else validate_on_value_change
        )
        self.validate_on_focus_lost = (
            settings.VALIDATE_ON_FOCUS_LOST
            if validate_on_focus_lost is Unset
            else validate_on_focus_lost
        )

    # ------------------------------------------------------------------ value

    def get_value(self) -> V:
        if self._value_getter is None:
            raise NotImplementedError(
                f"{type(self).__name__} has no value getter"
            )
        return self._value_getter()

    @property
    def value(self) -> V:
        return self.get_value()

    # ------------------------------------------------------------- validators

    @property
    def validators(self) -> tuple[Validator[V], ...]:
        return self._validators.snapshot()

    def add_validator(self, validator: Validator[V], /) -> None:
        self._validators.add(validator)

    def add_all_validators(self, *validators: Validator[V]) -> None:
        """Accepts validators as varargs or as a single iterable."""
        self._validators.add_all(
            to_items(validators, "The collection may not be None")
        )

    def remove_validator(self, validator: Validator[V], /) -> None:
        self._validators.remove(validator)

    def remove_all_validators(self, *validators: Validator[V]) -> None:
        """Remove the given validators, or every validator if none given."""
        if not validators:
            self._validators.clear()
            return
        self._validators.remove_all(
            to_items(validators, "The collection may not be None")
        )

    # -------------------------------------------------------------- listeners

    def add_validation_listener(self, listener: ValidationListener[V]) -> None:
        self._listeners.add(listener)

    def remove_validation_listener(
        self, listener: ValidationListener[V]
    ) -> None:
        self._listeners.remove(listener)

    def _notify_success(self) -> None:
        for listener in self._listeners:
            listener.on_validation_success(self)

    def _notify_failure(self, validator: Validator[V]) -> None:
        for listener in self._listeners:
            listener.on_validation_failure(self, validator)

    # ------------------------------------------------------------- validation

    def _left_channel_validators(self) -> Iterable[Validator[V]]:
        """Subject-specific checks evaluated before the rule set."""
        return ()

    def _right_channel_validators(self) -> Iterable[Validator[V]]:
        """Subject-specific checks shown in the right slot."""
        return ()

    def _evaluate(
        self, validators: Iterable[Validator[V]], value: V
    ) -> list[Validator[V]]:
        failures = []
        for validator in tuple(validators):
            if not validator.validate(value):
                logger.debug(
                    "%s failed %r", type(self).__name__, validator
                )
                self._notify_failure(validator)
                failures.append(validator)
        return failures

    def validate(self) -> bool:
        """Validate the current value against both channels.

        Every failing validator is reported to the listeners; only the first
        one per channel becomes the displayed message. Listeners receive one
        success notification when nothing failed.
        """
        value = self.get_value()
        left = self._evaluate(
            chain(self._left_channel_validators(), self._validators), value
        )
        right = self._evaluate(self._right_channel_validators(), value)

        result = ValidationResult(
            valid=not left and not right,
            left=left[0] if left else None,
            right=right[0] if right else None,
            failures=tuple(left + right),
        )
        self._last_result = result
        self._show_error(
            result.left.error_message if result.left is not None else None,
            result.left.icon if result.left is not None else None,
        )
        self._right_message = (
            result.right.error_message if result.right is not None else None
        )
        self._state = (
            ValidationState.VALID if result.valid else ValidationState.INVALID
        )
        logger.debug(
            "%s validated: %s (%d failure(s))",
            type(self).__name__,
            self._state.value,
            len(result.failures),
        )

        if result.valid:
            self._notify_success()
        self._on_validate(result.valid)
        return result.valid

    def _on_validate(self, valid: bool) -> None:
        """Hook for subclasses, called at the end of every ``validate()``."""

    @property
    def last_result(self) -> ValidationResult[V] | None:
        return self._last_result

    @property
    def state(self) -> ValidationState:
        return self._state

    @property
    def is_valid(self) -> bool | None:
        """``None`` until validated or after the error was cleared."""
        if self._state is ValidationState.UNVALIDATED:
            return None
        return self._state is ValidationState.VALID

    # ---------------------------------------------------------- display state

    def _show_error(self, error: str | None, icon: Any | None = None) -> None:
        self._error = error
        self._error_icon = icon if error is not None else None

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def error_icon(self) -> Any | None:
        return self._error_icon

    def set_error(self, error: str | None, icon: Any | None = None) -> None:
        """Show ``error`` without running any validator.

        ``None`` clears the displayed error and resets the subject to
        :attr:`ValidationState.UNVALIDATED`.
        """
        self._show_error(error, icon)
        if error is None:
            self._right_message = None
            self._state = ValidationState.UNVALIDATED
        else:
            self._state = ValidationState.INVALID

    def clear_error(self) -> None:
        self.set_error(None)

    @property
    def helper_text(self) -> str | None:
        return self._helper_text

    @helper_text.setter
    def helper_text(self, value: str | None) -> None:
        self._helper_text = value

    @property
    def left_message(self) -> str | None:
        """Whatever the left slot currently shows: the error or the helper."""
        return self._error if self._error is not None else self._helper_text

    @property
    def right_message(self) -> str | None:
        return self._right_message

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        if not self._enabled:
            self.set_error(None)

    # ---------------------------------------------------------------- triggers

    def notify_value_changed(self) -> bool | None:
        """Validate if the subject validates on value changes."""
        if self.validate_on_value_change:
            return self.validate()
        return None

    def notify_focus_lost(self) -> bool | None:
        """Validate if the subject validates when it loses focus."""
        if self.validate_on_focus_lost:
            return self.validate()
        return None

    # ------------------------------------------------------------ persistence

    def save_state(self) -> SavedState:
        return SavedState(
            validated=self._state is not ValidationState.UNVALIDATED,
            validate_on_value_change=self.validate_on_value_change,
            validate_on_focus_lost=self.validate_on_focus_lost,
        )

    def restore_state(self, state: SavedState | bytes | str) -> None:
        """Apply saved flags, re-validating if the subject was validated."""
        if not isinstance(state, SavedState):
            state = self._state_type().decode(state)
        self._check_state(state)
        self.validate_on_value_change = state.validate_on_value_change
        self.validate_on_focus_lost = state.validate_on_focus_lost
        self._restore_extra(state)
        if state.validated:
            self.validate()

    def _state_type(self) -> type[SavedState]:
        return SavedState

    def _check_state(self, state: SavedState) -> None:
        """Reject a state before any of it is applied."""

    def _restore_extra(self, state: SavedState) -> None:
        """Hook for subclasses persisting more than the flags."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(validators={len(self._validators)}, "
            f"state={self._state.value})"
        )
