# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Format validators. Each one accepts empty text."""

from __future__ import annotations

import ipaddress
import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .base import AbstractValidator, MessageRef
from .text import RegexValidator, as_text

__all__ = (
    "DomainNameValidator",
    "EmailAddressValidator",
    "IPv4AddressValidator",
    "IPv6AddressValidator",
    "IRIValidator",
    "PhoneNumberValidator",
)

_DOMAIN_NAME = (
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}"
)

# unicode labels, host may also be a dotted quad
_IRI_LABEL = r"[^\W_](?:[\w-]{0,61}[^\W_])?"
_IRI = (
    r"(?:(?:https?|ftp|rtsp)://)?"
    r"(?:[^\s/?#@:]+(?::[^\s/?#@]*)?@)?"
    rf"(?:(?:{_IRI_LABEL}\.)+[^\W\d_]{{2,63}}|(?:\d{{1,3}}\.){{3}}\d{{1,3}})"
    r"(?::\d{1,5})?"
    r"(?:/[^\s?#]*)?(?:\?[^\s#]*)?(?:#\S*)?"
)

_PHONE_NUMBER = r"(?:\+\d{1,3} |\+)?\d{6,14}"


class _EmptyOrRegexValidator(RegexValidator):
    REGEX: re.Pattern

    def __init__(
        self, error_message: str | MessageRef, *, icon: Any | None = None
    ):
        super().__init__(error_message, self.REGEX, icon=icon)

    def validate(self, value: str) -> bool:
        return not as_text(value) or super().validate(value)


class DomainNameValidator(_EmptyOrRegexValidator):
    REGEX = re.compile(_DOMAIN_NAME)


class IRIValidator(_EmptyOrRegexValidator):
    """Web addresses, optionally with scheme, port, path and query."""

    REGEX = re.compile(_IRI)


class PhoneNumberValidator(_EmptyOrRegexValidator):
    """6 to 14 digits, optionally led by ``+`` or ``+<country code> ``."""

    REGEX = re.compile(_PHONE_NUMBER)


class IPv4AddressValidator(AbstractValidator[str]):

    def validate(self, value: str) -> bool:
        text = as_text(value)
        if not text:
            return True
        try:
            ipaddress.IPv4Address(text)
        except ValueError:
            return False
        return True


class IPv6AddressValidator(AbstractValidator[str]):

    def validate(self, value: str) -> bool:
        text = as_text(value)
        if not text:
            return True
        try:
            ipaddress.IPv6Address(text)
        except ValueError:
            return False
        return True


class EmailAddressValidator(AbstractValidator[str]):
    """Syntax check only, no DNS lookup."""

    def validate(self, value: str) -> bool:
        text = as_text(value)
        if not text:
            return True
        try:
            validate_email(text, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
