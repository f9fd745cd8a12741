# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .._errors import InvalidArgumentError
from ..config import settings
from ..ln import MaybeUnset, Unset, ensure_at_least, ensure_not_none
from ..validation.state import SavedState, SelectionSavedState
from ..validation.subject import ValidatableSubject

__all__ = ("NO_SELECTION", "SelectionField")

NO_SELECTION = -1


class SelectionField(ValidatableSubject[Any]):
    """Headless dropdown. Its value is the selected item, ``None`` if none."""

    def __init__(
        self,
        items: Iterable[Any] = (),
        *,
        selected_index: int = NO_SELECTION,
        hint: str | None = None,
        hint_color: MaybeUnset[int] = Unset,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self._items = tuple(ensure_not_none(items, "The items may not be None"))
        self._selected_index = self._check_index(selected_index)
        self.hint = hint
        self.hint_color = (
            settings.DEFAULT_HINT_COLOR if hint_color is Unset else hint_color
        )

    def _check_index(self, index: int) -> int:
        ensure_at_least(index, NO_SELECTION, "The index must be at least -1")
        if index >= len(self._items):
            raise InvalidArgumentError.from_value(
                index,
                expected=f"< {len(self._items)}",
                message="The index is out of range",
            )
        return index

    @property
    def items(self) -> tuple[Any, ...]:
        return self._items

    @items.setter
    def items(self, value: Iterable[Any]) -> None:
        """Replacing the items drops the selection."""
        self._items = tuple(ensure_not_none(value, "The items may not be None"))
        self._selected_index = NO_SELECTION

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @selected_index.setter
    def selected_index(self, value: int) -> None:
        self._selected_index = self._check_index(value)
        self.notify_value_changed()

    def select(self, item: Any) -> None:
        """Select the first item equal to ``item``."""
        try:
            index = self._items.index(item)
        except ValueError as e:
            raise InvalidArgumentError.from_value(
                item, message="The item is not one of the items", cause=e
            ) from e
        self.selected_index = index

    def clear_selection(self) -> None:
        self.selected_index = NO_SELECTION

    def get_value(self) -> Any:
        if self._selected_index == NO_SELECTION:
            return None
        return self._items[self._selected_index]

    @property
    def selected_item(self) -> Any:
        return self.get_value()

    def save_state(self) -> SelectionSavedState:
        base = super().save_state()
        return SelectionSavedState(
            **base.model_dump(),
            selected_index=self._selected_index,
            hint=self.hint,
            hint_color=self.hint_color,
        )

    def _state_type(self) -> type[SavedState]:
        return SelectionSavedState

    def _check_state(self, state: SavedState) -> None:
        if isinstance(state, SelectionSavedState):
            self._check_index(state.selected_index)

    def _restore_extra(self, state: SavedState) -> None:
        if not isinstance(state, SelectionSavedState):
            return
        self._selected_index = self._check_index(state.selected_index)
        self.hint = state.hint
        if state.hint_color is not None:
            self.hint_color = state.hint_color
