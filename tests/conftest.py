# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from fieldrules import ValidationListener


class Catalog:
    """Minimal text catalog implementing ``get_text``."""

    def __init__(self, texts):
        self.texts = dict(texts)

    def get_text(self, key, /):
        return self.texts[key]


class RecordingListener(ValidationListener):
    """Records every notification in order."""

    def __init__(self):
        self.events = []

    def on_validation_success(self, subject):
        self.events.append(("success", subject, None))

    def on_validation_failure(self, subject, validator):
        self.events.append(("failure", subject, validator))

    @property
    def successes(self):
        return [e for e in self.events if e[0] == "success"]

    @property
    def failures(self):
        return [e[2] for e in self.events if e[0] == "failure"]


class Box:
    """Mutable value holder used as a subject's value getter."""

    def __init__(self, value=None):
        self.value = value

    def get(self):
        return self.value


@pytest.fixture
def catalog():
    return Catalog({"cancel": "Cancel", "copy": "Copy", "empty": ""})


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def box():
    return Box("")
