# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from fieldrules import InvalidArgumentError
from fieldrules.rule import (
    ConjunctiveValidator,
    DisjunctiveValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NegateValidator,
    NotEmptyValidator,
    NumberValidator,
)


class Counting(NotEmptyValidator):
    """Counts how often it was asked."""

    def __init__(self, message="counted"):
        super().__init__(message)
        self.calls = 0

    def validate(self, value):
        self.calls += 1
        return super().validate(value)


class TestNegateValidator:

    def test_inverts_child(self):
        validator = NegateValidator("foo", NotEmptyValidator("bar"))
        assert validator.validate("")
        assert not validator.validate("text")

    def test_set_validator(self):
        validator = NegateValidator("foo", NotEmptyValidator("bar"))
        child = NumberValidator("digits")
        validator.set_validator(child)
        assert validator.validator is child
        assert validator.validate("abc")
        assert not validator.validate("123")

    def test_none_child_raises(self):
        with pytest.raises(InvalidArgumentError):
            NegateValidator("foo", None)
        validator = NegateValidator("foo", NotEmptyValidator("bar"))
        with pytest.raises(InvalidArgumentError):
            validator.set_validator(None)


class TestConjunctiveValidator:

    def test_all_must_pass(self):
        validator = ConjunctiveValidator(
            "foo", MinLengthValidator("min", 2), MaxLengthValidator("max", 4)
        )
        assert validator.validate("abc")
        assert not validator.validate("a")
        assert not validator.validate("abcde")

    def test_children_kept_in_order(self):
        first, second = NotEmptyValidator("a"), NumberValidator("b")
        validator = ConjunctiveValidator("foo", first, second)
        assert validator.validators == (first, second)

    def test_short_circuits_in_order(self):
        first, second = Counting(), Counting()
        ConjunctiveValidator("foo", first, second).validate("")
        assert (first.calls, second.calls) == (1, 0)

    def test_empty_children_raise(self):
        with pytest.raises(InvalidArgumentError):
            ConjunctiveValidator("foo")

    def test_set_validators(self):
        validator = ConjunctiveValidator("foo", NotEmptyValidator("a"))
        child = NumberValidator("b")
        validator.set_validators([child])
        assert validator.validators == (child,)
        with pytest.raises(InvalidArgumentError):
            validator.set_validators([])
        with pytest.raises(InvalidArgumentError):
            validator.set_validators(None)
        with pytest.raises(InvalidArgumentError):
            validator.set_validators([child, None])
        assert validator.validators == (child,)


class TestDisjunctiveValidator:

    def test_one_must_pass(self):
        validator = DisjunctiveValidator(
            "foo", NumberValidator("digits"), MinLengthValidator("min", 5)
        )
        assert validator.validate("123")
        assert validator.validate("abcdef")
        assert not validator.validate("abc")

    def test_empty_children_raise(self):
        with pytest.raises(InvalidArgumentError):
            DisjunctiveValidator("foo")
