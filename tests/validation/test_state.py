# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import orjson
import pytest
from pydantic import ValidationError

from fieldrules import InvalidArgumentError
from fieldrules.validation import SavedState, SelectionSavedState


class TestSavedState:

    def test_defaults(self):
        state = SavedState()
        assert state.validated is False
        assert state.validate_on_value_change is True
        assert state.validate_on_focus_lost is True

    def test_encode_is_json(self):
        state = SavedState(validated=True, validate_on_focus_lost=False)
        assert orjson.loads(state.encode()) == {
            "validated": True,
            "validate_on_value_change": True,
            "validate_on_focus_lost": False,
        }

    def test_decode(self):
        state = SavedState(validated=True, validate_on_value_change=False)
        assert SavedState.decode(state.encode()) == state
        assert SavedState.decode(state.encode().decode()) == state

    @pytest.mark.parametrize(
        "data", [b"not json", b"[]", b'{"unknown": 1}', b'{"validated": "x"}']
    )
    def test_decode_invalid(self, data):
        with pytest.raises(InvalidArgumentError):
            SavedState.decode(data)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            SavedState().validated = True


class TestSelectionSavedState:

    def test_defaults(self):
        state = SelectionSavedState()
        assert state.selected_index == -1
        assert state.hint is None
        assert state.hint_color is None

    def test_decode(self):
        state = SelectionSavedState(
            validated=True, selected_index=2, hint="Pick", hint_color=0xFF
        )
        assert SelectionSavedState.decode(state.encode()) == state

    def test_index_lower_bound(self):
        with pytest.raises(ValidationError):
            SelectionSavedState(selected_index=-2)
