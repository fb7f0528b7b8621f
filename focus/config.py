# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ("FocusSettings", "settings")


class FocusSettings(BaseSettings, frozen=True):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="FOCUS_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    NONE_AS_MISSING: bool = Field(
        default=False,
        description="Report a stored None as a missing focus",
    )
    KEYWORD_SEQUENCES: bool = Field(
        default=True,
        description="Treat lists of (str, value) pairs as key-labeled sequences",
    )
    NEGATIVE_INDICES: bool = Field(
        default=True,
        description="Allow Python negative indexing on sequences and tuples",
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = FocusSettings()
# Store the instance in the class variable for singleton pattern
FocusSettings._instance = settings
