from .password import PasswordField
from .selection import NO_SELECTION, SelectionField
from .text import TextField

__all__ = [
    "NO_SELECTION",
    "PasswordField",
    "SelectionField",
    "TextField",
]
