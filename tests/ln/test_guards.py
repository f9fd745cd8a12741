# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import copy
import pickle

import pytest

from fieldrules import InvalidArgumentError
from fieldrules.ln import (
    Undefined,
    Unset,
    ensure_at_least,
    ensure_not_empty,
    ensure_not_none,
    ensure_type,
    is_absent,
    is_sentinel,
    not_sentinel,
    to_items,
)


class TestSentinels:

    def test_falsy_and_named(self):
        assert not Unset and not Undefined
        assert repr(Unset) == "Unset"
        assert str(Undefined) == "Undefined"

    def test_identity_survives_copies(self):
        assert copy.copy(Unset) is Unset
        assert copy.deepcopy(Undefined) is Undefined
        assert pickle.loads(pickle.dumps(Unset)) is Unset

    def test_predicates(self):
        assert is_sentinel(Unset) and is_sentinel(Undefined)
        assert not is_sentinel(None)
        assert not_sentinel(0)
        assert is_absent(None) and is_absent(Unset)
        assert not is_absent("")


class TestGuards:

    def test_ensure_not_none(self):
        assert ensure_not_none("x", "msg") == "x"
        with pytest.raises(InvalidArgumentError, match="msg"):
            ensure_not_none(None, "msg")
        with pytest.raises(InvalidArgumentError):
            ensure_not_none(Unset, "msg")

    def test_ensure_not_empty(self):
        assert ensure_not_empty([1], "msg") == [1]
        with pytest.raises(InvalidArgumentError):
            ensure_not_empty("", "msg")
        with pytest.raises(InvalidArgumentError):
            ensure_not_empty((), "msg")

    def test_ensure_at_least(self):
        assert ensure_at_least(1, 1, "msg") == 1
        with pytest.raises(InvalidArgumentError) as exc_info:
            ensure_at_least(0, 1, "msg")
        assert exc_info.value.details["expected"] == ">= 1"
        with pytest.raises(InvalidArgumentError):
            ensure_at_least(False, 0, "msg")

    def test_ensure_type(self):
        assert ensure_type(1, int, "msg") == 1
        with pytest.raises(InvalidArgumentError) as exc_info:
            ensure_type("1", int, "msg")
        assert exc_info.value.details["expected"] == "int"


class TestToItems:

    def test_varargs(self):
        assert to_items((1, 2), "msg") == (1, 2)

    def test_single_iterable(self):
        assert to_items(([1, 2],), "msg") == (1, 2)

    def test_single_string_is_one_item(self):
        assert to_items(("abc",), "msg") == ("abc",)

    def test_single_none_rejected(self):
        with pytest.raises(InvalidArgumentError):
            to_items((None,), "msg")

    def test_empty(self):
        assert to_items((), "msg") == ()
