# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from fractions import Fraction

from .._concepts import Constraint
from ..config import settings
from ..ln import (
    MaybeUnset,
    Unset,
    ensure_at_least,
    ensure_not_empty,
    ensure_type,
    to_items,
)
from ..rule.base import MessageRef, resolve_message
from ..validation.rulebook import RuleBook

logger = logging.getLogger(__name__)

__all__ = (
    "PasswordStrength",
    "StrengthFeedback",
    "select_tier",
)


def select_tier(score: float | Fraction, tier_count: int) -> int:
    """Map a score in [0, 1] to one of ``tier_count`` tiers.

    The index is ``floor(score / (1 / tier_count)) - 1`` clamped into the
    valid range, so the lowest tier covers both a zero score and the whole
    first interval, and only a perfect score reaches the top tier when there
    are two tiers. It is computed as ``score * tier_count`` so that scores on
    a boundary, such as 3/5 with five tiers, select the upper tier.

    >>> select_tier(0.51, 2)
    0
    >>> select_tier(1.0, 2)
    1
    >>> select_tier(Fraction(3, 5), 5)
    2
    """
    ensure_at_least(tier_count, 1, "The number of tiers must be at least 1")
    index = math.floor(score * tier_count) - 1
    return max(0, min(index, tier_count - 1))


@dataclass(frozen=True, slots=True)
class StrengthFeedback:
    """Helper text and color a password field should display."""

    text: str | None
    color: int
    prefix: str | None = None
    prefix_color: int | None = None
    score: float | None = None
    """``None`` when scoring was bypassed."""

    @property
    def scored(self) -> bool:
        return self.score is not None

    def render(self) -> str | None:
        """Plain-text form, e.g. ``"Password strength: weak"``."""
        if self.text is None:
            return None
        if self.prefix:
            return f"{self.prefix}: {self.text}"
        return self.text


class PasswordStrength:
    """
    Scores a password by the fraction of satisfied constraints.

    The score selects a helper text and, independently, a helper text color.
    Each list is bucketed by its own length, so three texts and five colors
    yield different tier boundaries for the same score.

    Examples:
        >>> from fieldrules import constraints as c
        >>> strength = PasswordStrength(
        ...     [c.min_length(8), c.contains_number()],
        ...     helper_texts=["weak", "strong"],
        ... )
        >>> strength.feedback("abc").text
        'weak'
        >>> strength.feedback("abcdefg1").render()
        'Password strength: strong'
    """

    def __init__(
        self,
        constraints: Iterable[Constraint[str]] | None = None,
        *,
        helper_texts: Iterable[str | MessageRef] | None = None,
        helper_text_colors: Iterable[int] | None = None,
        verification_prefix: MaybeUnset[str | None] = Unset,
        regular_helper_text: str | None = None,
        regular_helper_text_color: MaybeUnset[int] = Unset,
        on_change: Callable[[], None] | None = None,
    ):
        """
        Args:
            constraints: Scoring constraints, in order.
            helper_texts: One text per tier, weakest first.
            helper_text_colors: One color per tier, weakest first.
            verification_prefix: Text put before the tier text. ``None``
                disables it; ``Unset`` uses the configured default.
            regular_helper_text: Shown whenever scoring is bypassed.
            regular_helper_text_color: Color of the regular helper text and
                of the prefix.
            on_change: Called after every mutation, e.g. to refresh a field.
        """
        self._on_change = None
        self._constraints: RuleBook[Constraint[str]] = RuleBook(
            constraints, label="constraint"
        )
        self._helper_texts: list[str] = []
        self._helper_text_colors: list[int] = []
        self.add_all_helper_texts(helper_texts or ())
        self.add_all_helper_text_colors(helper_text_colors or ())
        self._verification_prefix = (
            settings.PASSWORD_VERIFICATION_PREFIX
            if verification_prefix is Unset
            else verification_prefix
        )
        self.regular_helper_text = regular_helper_text
        self.regular_helper_text_color = (
            settings.REGULAR_HELPER_TEXT_COLOR
            if regular_helper_text_color is Unset
            else regular_helper_text_color
        )
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    # ------------------------------------------------------------ constraints

    @property
    def constraints(self) -> tuple[Constraint[str], ...]:
        return self._constraints.snapshot()

    def add_constraint(self, constraint: Constraint[str]) -> None:
        if self._constraints.add(constraint):
            self._changed()

    def add_all_constraints(self, *constraints: Constraint[str]) -> None:
        for constraint in to_items(
            constraints, "The collection may not be None"
        ):
            self.add_constraint(constraint)

    def remove_constraint(self, constraint: Constraint[str]) -> None:
        if self._constraints.remove(constraint):
            self._changed()

    def remove_all_constraints(self, *constraints: Constraint[str]) -> None:
        """Remove the given constraints, or every constraint if none given."""
        if not constraints:
            self._constraints.clear()
            self._changed()
            return
        for constraint in to_items(
            constraints, "The collection may not be None"
        ):
            self.remove_constraint(constraint)

    # ----------------------------------------------------------- helper texts

    @property
    def helper_texts(self) -> tuple[str, ...]:
        return tuple(self._helper_texts)

    @staticmethod
    def _check_text(helper_text: str | MessageRef) -> str:
        text = resolve_message(
            ensure_not_empty(helper_text, "The helper text may not be empty")
        )
        return ensure_not_empty(text, "The helper text may not be empty")

    def add_helper_text(self, helper_text: str | MessageRef) -> None:
        text = self._check_text(helper_text)
        if text not in self._helper_texts:
            self._helper_texts.append(text)
            self._changed()

    def add_all_helper_texts(self, *helper_texts: str | MessageRef) -> None:
        for text in to_items(
            helper_texts, "The collection may not be None"
        ):
            self.add_helper_text(text)

    def remove_helper_text(self, helper_text: str | MessageRef) -> None:
        text = self._check_text(helper_text)
        if text in self._helper_texts:
            self._helper_texts.remove(text)
            self._changed()

    def remove_all_helper_texts(self, *helper_texts: str | MessageRef) -> None:
        """Remove the given texts, or every text if none given."""
        if not helper_texts:
            self._helper_texts.clear()
            self._changed()
            return
        for text in to_items(
            helper_texts, "The collection may not be None"
        ):
            self.remove_helper_text(text)

    # ---------------------------------------------------------- helper colors

    @property
    def helper_text_colors(self) -> tuple[int, ...]:
        return tuple(self._helper_text_colors)

    def add_helper_text_color(self, color: int) -> None:
        ensure_type(color, int, "The color must be an int")
        if color not in self._helper_text_colors:
            self._helper_text_colors.append(color)
            self._changed()

    def add_all_helper_text_colors(self, *colors: int) -> None:
        for color in to_items(
            colors, "The collection may not be None"
        ):
            self.add_helper_text_color(color)

    def remove_helper_text_color(self, color: int) -> None:
        if color in self._helper_text_colors:
            self._helper_text_colors.remove(color)
            self._changed()

    def remove_all_helper_text_colors(self, *colors: int) -> None:
        """Remove the given colors, or every color if none given."""
        if not colors:
            self._helper_text_colors.clear()
            self._changed()
            return
        for color in to_items(
            colors, "The collection may not be None"
        ):
            self.remove_helper_text_color(color)

    # ----------------------------------------------------------------- prefix

    @property
    def verification_prefix(self) -> str | None:
        return self._verification_prefix

    @verification_prefix.setter
    def verification_prefix(self, value: str | None) -> None:
        self._verification_prefix = value
        self._changed()

    # ---------------------------------------------------------------- scoring

    def _exact_score(self, text: str) -> Fraction | None:
        constraints = self._constraints.snapshot()
        if not constraints:
            return None
        satisfied = sum(1 for c in constraints if c.is_satisfied(text))
        return Fraction(satisfied, len(constraints))

    def compute_score(self, text: str) -> float | None:
        """Fraction of satisfied constraints, ``None`` without constraints."""
        score = self._exact_score(text)
        return None if score is None else float(score)

    def helper_text_for(self, score: float | Fraction) -> str | None:
        if not self._helper_texts:
            return None
        return self._helper_texts[select_tier(score, len(self._helper_texts))]

    def helper_text_color_for(self, score: float | Fraction) -> int:
        if not self._helper_text_colors:
            return self.regular_helper_text_color
        index = select_tier(score, len(self._helper_text_colors))
        return self._helper_text_colors[index]

    def regular_feedback(self) -> StrengthFeedback:
        return StrengthFeedback(
            text=self.regular_helper_text, color=self.regular_helper_text_color
        )

    def feedback(self, text: str, *, enabled: bool = True) -> StrengthFeedback:
        """What to display for ``text``.

        Scoring is bypassed, not scored as zero, when ``enabled`` is false,
        there are no constraints, ``text`` is empty or there are no helper
        texts; the regular helper text and color are returned instead.
        """
        if not enabled or not text or not self._constraints:
            return self.regular_feedback()

        score = self._exact_score(text)
        helper_text = self.helper_text_for(score)
        if helper_text is None:
            return self.regular_feedback()

        color = self.helper_text_color_for(score)
        logger.debug(
            "password score %s -> %r (color %#x)", score, helper_text, color
        )
        return StrengthFeedback(
            text=helper_text,
            color=color,
            prefix=self._verification_prefix,
            prefix_color=self.regular_helper_text_color,
            score=float(score),
        )
