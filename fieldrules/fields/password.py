# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .._concepts import Constraint
from ..ln import MaybeUnset, Unset
from ..password.strength import PasswordStrength, StrengthFeedback
from ..rule.base import MessageRef
from .text import TextField

__all__ = ("PasswordField",)


class PasswordField(TextField):
    """
    Text field that shows the strength of its password as helper text.

    The feedback is recomputed whenever the text, the constraints, the tiers,
    the prefix or the enabled flag change. While scoring is bypassed the
    field shows its regular helper text.

    Examples:
        >>> from fieldrules import constraints as c
        >>> field = PasswordField(
        ...     constraints=[c.min_length(8), c.contains_symbol()],
        ...     helper_texts=["weak", "strong"],
        ...     helper_text="Choose a password",
        ... )
        >>> field.helper_text
        'Choose a password'
        >>> field.text = "secret-password"
        >>> field.helper_text
        'Password strength: strong'
    """

    def __init__(
        self,
        text: str = "",
        *,
        constraints: Iterable[Constraint[str]] | None = None,
        helper_texts: Iterable[str | MessageRef] | None = None,
        helper_text_colors: Iterable[int] | None = None,
        verification_prefix: MaybeUnset[str | None] = Unset,
        helper_text: str | None = None,
        regular_helper_text_color: MaybeUnset[int] = Unset,
        **kwargs: Any,
    ):
        super().__init__(text, **kwargs)
        self._feedback: StrengthFeedback | None = None
        self._strength = PasswordStrength(
            constraints,
            helper_texts=helper_texts,
            helper_text_colors=helper_text_colors,
            verification_prefix=verification_prefix,
            regular_helper_text=helper_text,
            regular_helper_text_color=regular_helper_text_color,
            on_change=self._verify_password_strength,
        )
        self._verify_password_strength()

    @property
    def strength(self) -> PasswordStrength:
        return self._strength

    def _verify_password_strength(self) -> None:
        feedback = self._strength.feedback(self.text, enabled=self.enabled)
        self._feedback = feedback
        self._helper_text = feedback.render()

    def _on_text_changed(self) -> None:
        self._verify_password_strength()
        super()._on_text_changed()

    @property
    def feedback(self) -> StrengthFeedback:
        """What the helper slot currently shows."""
        return self._feedback

    @property
    def helper_text(self) -> str | None:
        return self._helper_text

    @helper_text.setter
    def helper_text(self, value: str | None) -> None:
        """Sets the regular helper text, shown while scoring is bypassed."""
        self._strength.regular_helper_text = value
        self._verify_password_strength()

    @property
    def regular_helper_text(self) -> str | None:
        return self._strength.regular_helper_text

    @property
    def helper_text_color(self) -> int:
        return self._feedback.color

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        TextField.enabled.fset(self, value)
        self._verify_password_strength()

    # constraints

    @property
    def constraints(self) -> tuple[Constraint[str], ...]:
        return self._strength.constraints

    def add_constraint(self, constraint: Constraint[str]) -> None:
        self._strength.add_constraint(constraint)

    def add_all_constraints(self, *constraints: Constraint[str]) -> None:
        self._strength.add_all_constraints(*constraints)

    def remove_constraint(self, constraint: Constraint[str]) -> None:
        self._strength.remove_constraint(constraint)

    def remove_all_constraints(self, *constraints: Constraint[str]) -> None:
        self._strength.remove_all_constraints(*constraints)

    # tiers

    @property
    def helper_texts(self) -> tuple[str, ...]:
        return self._strength.helper_texts

    def add_helper_text(self, helper_text: str | MessageRef) -> None:
        self._strength.add_helper_text(helper_text)

    def add_all_helper_texts(self, *helper_texts: str | MessageRef) -> None:
        self._strength.add_all_helper_texts(*helper_texts)

    def remove_helper_text(self, helper_text: str | MessageRef) -> None:
        self._strength.remove_helper_text(helper_text)

    def remove_all_helper_texts(self, *helper_texts: str | MessageRef) -> None:
        self._strength.remove_all_helper_texts(*helper_texts)

    @property
    def helper_text_colors(self) -> tuple[int, ...]:
        return self._strength.helper_text_colors

    def add_helper_text_color(self, color: int) -> None:
        self._strength.add_helper_text_color(color)

    def add_all_helper_text_colors(self, *colors: int) -> None:
        self._strength.add_all_helper_text_colors(*colors)

    def remove_helper_text_color(self, color: int) -> None:
        self._strength.remove_helper_text_color(color)

    def remove_all_helper_text_colors(self, *colors: int) -> None:
        self._strength.remove_all_helper_text_colors(*colors)

    @property
    def verification_prefix(self) -> str | None:
        return self._strength.verification_prefix

    @verification_prefix.setter
    def verification_prefix(self, value: str | None) -> None:
        self._strength.verification_prefix = value
