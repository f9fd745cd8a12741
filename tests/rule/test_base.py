# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from fieldrules import InvalidArgumentError, Unset
from fieldrules.ln import Undefined
from fieldrules.rule import MessageRef, NotNullValidator, resolve_message


class TestMessages:
    """Error message handling shared by every validator."""

    def test_literal_message(self):
        validator = NotNullValidator("foo")
        assert validator.error_message == "foo"
        assert validator.icon is None

    def test_message_from_resolver(self, catalog):
        validator = NotNullValidator(MessageRef(catalog, "cancel"))
        assert validator.error_message == "Cancel"

    def test_message_from_mapping(self):
        validator = NotNullValidator(MessageRef({"k": "From mapping"}, "k"))
        assert validator.error_message == "From mapping"

    def test_unknown_key_raises(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            NotNullValidator(MessageRef({}, "missing"))
        assert isinstance(exc_info.value.get_cause(), KeyError)

    def test_resolved_empty_message_raises(self, catalog):
        with pytest.raises(InvalidArgumentError):
            NotNullValidator(MessageRef(catalog, "empty"))

    @pytest.mark.parametrize("message", [None, ""])
    def test_absent_or_empty_message_raises(self, message):
        with pytest.raises(InvalidArgumentError):
            NotNullValidator(message)

    def test_set_error_message(self):
        validator = NotNullValidator("foo")
        validator.set_error_message("bar")
        assert validator.error_message == "bar"
        validator.error_message = "baz"
        assert validator.error_message == "baz"

    def test_set_error_message_keeps_old_on_failure(self):
        validator = NotNullValidator("foo")
        with pytest.raises(InvalidArgumentError):
            validator.set_error_message("")
        assert validator.error_message == "foo"

    def test_icon(self):
        icon = object()
        validator = NotNullValidator("foo", icon=icon)
        assert validator.icon is icon
        validator.icon = None
        assert validator.icon is None

    def test_resolve_message_passthrough(self):
        assert resolve_message("plain") == "plain"
        assert resolve_message(None) is None

    def test_identity_not_equality(self):
        assert NotNullValidator("foo") != NotNullValidator("foo")

    def test_repr(self):
        assert repr(NotNullValidator("foo")) == (
            "NotNullValidator(error_message='foo')"
        )


class TestNotNullValidator:

    @pytest.mark.parametrize("value", ["", "foo", 0, False, []])
    def test_accepts_present_values(self, value):
        assert NotNullValidator("foo").validate(value)

    @pytest.mark.parametrize("value", [None, Unset, Undefined])
    def test_rejects_absent_values(self, value):
        assert not NotNullValidator("foo").validate(value)
