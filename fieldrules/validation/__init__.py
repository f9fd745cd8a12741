"""
fieldrules validation protocol

Ordered rule sets, validatable subjects and their saved state.
"""

from .listener import CallbackListener, ValidationListener
from .rulebook import RuleBook
from .state import SavedState, SelectionSavedState
from .subject import ValidatableSubject, ValidationResult, ValidationState

__all__ = [
    "CallbackListener",
    "RuleBook",
    "SavedState",
    "SelectionSavedState",
    "ValidatableSubject",
    "ValidationListener",
    "ValidationResult",
    "ValidationState",
]
