# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging

from . import constraints as constraints
from . import ln as ln
from . import validators as validators
from ._concepts import Constraint, TextResolver, Validator
from ._errors import FieldRulesError, InvalidArgumentError
from .config import settings
from .fields import PasswordField, SelectionField, TextField
from .ln.types import Undefined, Unset
from .password import PasswordStrength, StrengthFeedback
from .rule import Case, MessageRef
from .validation import (
    CallbackListener,
    SavedState,
    ValidatableSubject,
    ValidationListener,
    ValidationResult,
    ValidationState,
)
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


__all__ = (
    "__version__",
    "CallbackListener",
    "Case",
    "Constraint",
    "FieldRulesError",
    "InvalidArgumentError",
    "MessageRef",
    "PasswordField",
    "PasswordStrength",
    "SavedState",
    "SelectionField",
    "StrengthFeedback",
    "TextField",
    "TextResolver",
    "Undefined",
    "Unset",
    "ValidatableSubject",
    "ValidationListener",
    "ValidationResult",
    "ValidationState",
    "Validator",
    "constraints",
    "ln",
    "logger",
    "settings",
    "validators",
)
