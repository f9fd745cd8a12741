from .strength import PasswordStrength, StrengthFeedback, select_tier

__all__ = [
    "PasswordStrength",
    "StrengthFeedback",
    "select_tier",
]
