# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from fieldrules import InvalidArgumentError, TextField, ValidationState
from fieldrules import validators as v


class TestTextField:

    def test_defaults(self):
        field = TextField()
        assert field.text == ""
        assert field.value == ""
        assert field.max_number_of_characters is None
        assert field.character_count_message is None
        assert field.state is ValidationState.UNVALIDATED

    def test_none_text_is_empty(self):
        field = TextField(None)
        assert field.text == ""
        field.text = None
        assert field.text == ""

    def test_text_change_validates(self):
        field = TextField()
        field.add_validator(v.not_empty("Required"))
        field.text = ""
        assert field.error == "Required"
        field.text = "Ann"
        assert field.error is None
        assert field.is_valid is True

    def test_text_change_without_validation(self):
        field = TextField(validate_on_value_change=False)
        field.add_validator(v.not_empty("Required"))
        field.text = ""
        assert field.state is ValidationState.UNVALIDATED

    def test_focus_lost(self):
        field = TextField(validate_on_value_change=False)
        field.add_validator(v.email_address("Invalid email"))
        field.text = "foo"
        assert field.notify_focus_lost() is False
        assert field.error == "Invalid email"


class TestCharacterLimit:

    def test_counter_message(self):
        field = TextField("ab", max_number_of_characters=3)
        assert field.character_count_message == "2/3"

    def test_over_limit_fails_right_channel(self):
        field = TextField(max_number_of_characters=3)
        field.add_validator(v.letter("Letters only"))
        field.text = "abcd"
        assert field.is_valid is False
        assert field.error is None
        assert field.right_message == "4/3"

    def test_within_limit(self):
        field = TextField(max_number_of_characters=3)
        field.text = "abc"
        assert field.is_valid is True
        assert field.right_message is None

    def test_custom_counter_format(self):
        field = TextField(
            "abcd",
            max_number_of_characters=2,
            max_characters_message="{current} of {maximum}",
        )
        assert field.validate() is False
        assert field.right_message == "4 of 2"

    @pytest.mark.parametrize("maximum", [0, -1, 1.5])
    def test_invalid_limit(self, maximum):
        with pytest.raises(InvalidArgumentError):
            TextField(max_number_of_characters=maximum)

    @pytest.mark.parametrize("message", ["", None])
    def test_empty_counter_message_rejected(self, message):
        with pytest.raises(InvalidArgumentError):
            TextField(max_number_of_characters=3, max_characters_message=message)

    def test_counter_message_setter_rejects_empty(self):
        field = TextField("ab", max_number_of_characters=3)
        with pytest.raises(InvalidArgumentError):
            field.max_characters_message = ""
        assert field.character_count_message == "2/3"

    def test_limit_removed(self):
        field = TextField("abcd", max_number_of_characters=2)
        field.max_number_of_characters = None
        assert field.validate() is True


class TestEqualFields:
    """A confirmation field validated against another field."""

    def test_confirmation(self):
        password = TextField()
        confirmation = TextField()
        confirmation.add_validator(v.equal("Mismatch", password))

        password.text = "secret"
        confirmation.text = "secret"
        assert confirmation.is_valid is True

        password.text = "changed"
        assert confirmation.validate() is False
        assert confirmation.error == "Mismatch"
