# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import orjson
from pydantic import BaseModel, ConfigDict, Field

from .._errors import InvalidArgumentError

__all__ = (
    "SavedState",
    "SelectionSavedState",
)


class SavedState(BaseModel):
    """Flat record of a subject's validation flags."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    validated: bool = False
    validate_on_value_change: bool = True
    validate_on_focus_lost: bool = True

    def encode(self) -> bytes:
        return orjson.dumps(self.model_dump())

    @classmethod
    def decode(cls, data: bytes | str):
        """Inverse of :meth:`encode`."""
        try:
            return cls.model_validate(orjson.loads(data))
        except (orjson.JSONDecodeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Cannot decode {cls.__name__}", cause=e
            ) from e


class SelectionSavedState(SavedState):
    """Adds the selection and hint of a :class:`SelectionField`."""

    selected_index: int = Field(default=-1, ge=-1)
    hint: str | None = None
    hint_color: int | None = None
