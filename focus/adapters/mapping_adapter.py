# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Key-value access for any :class:`collections.abc.Mapping`."""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any, ClassVar

from ..types import Found, NotFound, Result, Unsupported
from .adapter import ContainerAdapter

__all__ = ("MappingAdapter",)


def _contains(structure: Any, key: Any) -> bool:
    # an unhashable key can never be present
    try:
        return key in structure
    except TypeError:
        return False


class MappingAdapter(ContainerAdapter):
    kind: ClassVar[str] = "mapping"

    @classmethod
    def accepts(cls, structure: Any, /) -> bool:
        return isinstance(structure, Mapping)

    @classmethod
    def get(cls, structure: Any, key: Any, /, *, optic: str = "lens") -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        # membership first, a defaultdict must not grow on lookup
        if not _contains(structure, key):
            return NotFound(key, optic)
        return Found(structure[key])

    @classmethod
    def put(
        cls, structure: Any, key: Any, value: Any, /, *, optic: str = "lens"
    ) -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if not _contains(structure, key):
            return NotFound(key, optic)
        if isinstance(structure, MutableMapping):
            new = copy.copy(structure)
            new[key] = value
            return Found(new)
        # read-only mappings (e.g. MappingProxyType) are rebuilt
        return Found(type(structure)({**structure, key: value}))

    @classmethod
    def keys(cls, structure: Any, /) -> list[Any]:
        return list(structure.keys())
