# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Positional access for plain tuples."""

from __future__ import annotations

from typing import Any, ClassVar

from ..types import Found, NotFound, Result, Unsupported
from .adapter import ContainerAdapter, normalize_index

__all__ = ("TupleAdapter",)


class TupleAdapter(ContainerAdapter):
    kind: ClassVar[str] = "tuple"

    @classmethod
    def accepts(cls, structure: Any, /) -> bool:
        return isinstance(structure, tuple)

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
        return Found(structure[:i] + (value,) + structure[i + 1 :])

    @classmethod
    def keys(cls, structure: Any, /) -> list[int]:
        return list(range(len(structure)))
