# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from ._sentinel import (
    T,
    Undefined,
    UndefinedType,
    Unset,
    UnsetType,
    is_undefined,
    is_unset,
)
from .result import (
    Failure,
    Found,
    NotFound,
    Result,
    Unsupported,
    is_failure,
    is_result,
)

__all__ = (
    # Sentinel types
    "Undefined",
    "Unset",
    "UndefinedType",
    "UnsetType",
    "T",
    "is_undefined",
    "is_unset",
    # Results
    "Found",
    "NotFound",
    "Unsupported",
    "Failure",
    "Result",
    "is_failure",
    "is_result",
)
