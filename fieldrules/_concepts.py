# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

V = TypeVar("V")


__all__ = (
    "Invariant",
    "Constraint",
    "Validator",
    "Observable",
    "Validateable",
    "TextResolver",
)


class Invariant(ABC):
    """Predicates over a value."""


class Constraint(Invariant, Generic[V]):
    """Satisfied/unsatisfied check with no message, used for scoring."""

    @abstractmethod
    def is_satisfied(self, value: V) -> bool:
        pass


class Validator(Invariant, Generic[V]):
    """Pass/fail check carrying the message to show when it fails."""

    @property
    @abstractmethod
    def error_message(self) -> str:
        pass

    @property
    @abstractmethod
    def icon(self) -> Any | None:
        pass

    @abstractmethod
    def validate(self, value: V) -> bool:
        pass


class Observable(ABC):
    """Entities that notify listeners."""


class Validateable(Observable, Generic[V]):
    """A subject holding validators that can be validated on demand."""

    @property
    @abstractmethod
    def validators(self) -> tuple[Validator[V], ...]:
        pass

    @abstractmethod
    def add_validator(self, validator: Validator[V], /) -> None:
        pass

    @abstractmethod
    def remove_validator(self, validator: Validator[V], /) -> None:
        pass

    @abstractmethod
    def validate(self) -> bool:
        pass


@runtime_checkable
class TextResolver(Protocol):
    """Resolves a message key to display text, e.g. a translation catalog."""

    def get_text(self, key: Any, /) -> str: ...
