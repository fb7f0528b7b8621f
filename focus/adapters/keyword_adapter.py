# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Label or position access for key-labeled sequences.

A key-labeled sequence is a non-empty list of ``(str, value)`` pairs, e.g.
``[("host", "localhost"), ("port", 8080)]``. String keys address the first
pair carrying that label, integer keys address positions.
"""

from __future__ import annotations

from typing import Any, ClassVar

from .. import config
from ..types import Found, NotFound, Result, Unsupported
from .adapter import ContainerAdapter, normalize_index

__all__ = ("KeywordAdapter", "is_keyword_sequence")


def is_keyword_sequence(structure: Any) -> bool:
    return (
        isinstance(structure, list)
        and len(structure) > 0
        and all(
            isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)
            for item in structure
        )
    )


class KeywordAdapter(ContainerAdapter):
    kind: ClassVar[str] = "keyword"

    @classmethod
    def accepts(cls, structure: Any, /) -> bool:
        return config.settings.KEYWORD_SEQUENCES and is_keyword_sequence(structure)

    @classmethod
    def _locate(cls, structure: list, key: Any) -> int | None:
        if isinstance(key, str):
            for i, (label, _) in enumerate(structure):
                if label == key:
                    return i
            return None
        return normalize_index(key, len(structure))

    @classmethod
    def get(cls, structure: Any, key: Any, /, *, optic: str = "lens") -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if (i := cls._locate(structure, key)) is None:
            return NotFound(key, optic)
        if isinstance(key, str):
            return Found(structure[i][1])
        return Found(structure[i])

    @classmethod
    def put(
        cls, structure: Any, key: Any, value: Any, /, *, optic: str = "lens"
    ) -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if (i := cls._locate(structure, key)) is None:
            return NotFound(key, optic)
        new = list(structure)
        new[i] = (key, value) if isinstance(key, str) else value
        return Found(new)

    @classmethod
    def keys(cls, structure: Any, /) -> list[str]:
        # first occurrence wins, as with lookups
        return list(dict.fromkeys(label for label, _ in structure))
