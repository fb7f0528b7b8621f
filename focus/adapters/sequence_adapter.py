# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Positional access for mutable sequences (lists).

``bytearray`` and ``array.array`` are not handled: their items are typed.
"""

from __future__ import annotations

import array
import copy
from collections.abc import MutableSequence
from typing import Any, ClassVar

from ..types import Found, NotFound, Result, Unsupported
from .adapter import ContainerAdapter, normalize_index

__all__ = ("SequenceAdapter",)


class SequenceAdapter(ContainerAdapter):
    kind: ClassVar[str] = "sequence"

    @classmethod
    def accepts(cls, structure: Any, /) -> bool:
        return isinstance(structure, MutableSequence) and not isinstance(
            structure, (bytearray, array.array)
        )

    @classmethod
    def get(cls, structure: Any, key: Any, /, *, optic: str = "lens") -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if (i := normalize_index(key, len(structure))) is None:
            return NotFound(key, optic)
        return Found(structure[i])

    @classmethod
    def put(
        cls, structure: Any, key: Any, value: Any, /, *, optic: str = "lens"
    ) -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if (i := normalize_index(key, len(structure))) is None:
            return NotFound(key, optic)
        new = copy.copy(structure)
        new[i] = value
        return Found(new)

    @classmethod
    def keys(cls, structure: Any, /) -> list[int]:
        return list(range(len(structure)))
