from .base import AbstractValidator, MessageRef, NotNullValidator, resolve_message
from .composite import ConjunctiveValidator, DisjunctiveValidator, NegateValidator
from .misc import (
    DomainNameValidator,
    EmailAddressValidator,
    IPv4AddressValidator,
    IPv6AddressValidator,
    IRIValidator,
    PhoneNumberValidator,
)
from .text import (
    BeginsWithUppercaseLetterValidator,
    Case,
    EqualValidator,
    HasText,
    LetterOrNumberValidator,
    LetterValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NoWhitespaceValidator,
    NotEmptyValidator,
    NumberValidator,
    RegexValidator,
)

__all__ = [
    # Base classes
    "AbstractValidator",
    "MessageRef",
    "resolve_message",
    # Combinators
    "NegateValidator",
    "ConjunctiveValidator",
    "DisjunctiveValidator",
    # Generic
    "NotNullValidator",
    # Text
    "Case",
    "HasText",
    "NotEmptyValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "NoWhitespaceValidator",
    "NumberValidator",
    "RegexValidator",
    "LetterValidator",
    "LetterOrNumberValidator",
    "BeginsWithUppercaseLetterValidator",
    "EqualValidator",
    # Formats
    "DomainNameValidator",
    "EmailAddressValidator",
    "IPv4AddressValidator",
    "IPv6AddressValidator",
    "IRIValidator",
    "PhoneNumberValidator",
]
