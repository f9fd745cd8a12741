# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("AppSettings", "settings")


class AppSettings(BaseSettings, frozen=True):
    """Library defaults with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_prefix="FIELDRULES_",
        case_sensitive=False,
        extra="ignore",
    )

    DEFAULT_ERROR_MESSAGE: str = Field(
        default="Invalid value",
        min_length=1,
        description="Message used when a factory is called without one",
    )
    PASSWORD_VERIFICATION_PREFIX: str = "Password strength"

    # policy flags handed to new subjects
    VALIDATE_ON_VALUE_CHANGE: bool = True
    VALIDATE_ON_FOCUS_LOST: bool = True

    MAX_CHARACTERS_MESSAGE: str = Field(
        default="{current}/{maximum}",
        description="Format of the character counter, keys: current, maximum",
    )

    # ARGB colors
    REGULAR_HELPER_TEXT_COLOR: int = 0x8A000000
    DEFAULT_HINT_COLOR: int = 0x61000000

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = AppSettings()
# Store the instance in the class variable for singleton pattern
AppSettings._instance = settings
