# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Field access for user-defined records.

Supported records: dataclass instances, pydantic models and namedtuples.
Records are treated as mappings over their declared fields; namedtuples also
keep their tuple positions.
"""

from __future__ import annotations

import copy
import dataclasses
from typing import Any, ClassVar

from pydantic import BaseModel

from ..types import Found, NotFound, Result, Unsupported
from .adapter import ContainerAdapter, normalize_index

__all__ = ("RecordAdapter", "is_namedtuple", "record_fields")


def is_namedtuple(structure: Any) -> bool:
    return isinstance(structure, tuple) and hasattr(type(structure), "_fields")


def _is_dataclass_instance(structure: Any) -> bool:
    return dataclasses.is_dataclass(structure) and not isinstance(structure, type)


def record_fields(structure: Any) -> tuple[str, ...]:
    """Declared field names of a record instance, in declaration order."""
    if isinstance(structure, BaseModel):
        return tuple(type(structure).model_fields)
    if is_namedtuple(structure):
        return tuple(structure._fields)
    return tuple(f.name for f in dataclasses.fields(structure))


class RecordAdapter(ContainerAdapter):
    kind: ClassVar[str] = "record"

    @classmethod
    def accepts(cls, structure: Any, /) -> bool:
        return (
            isinstance(structure, BaseModel)
            or is_namedtuple(structure)
            or _is_dataclass_instance(structure)
        )

    @classmethod
    def get(cls, structure: Any, key: Any, /, *, optic: str = "lens") -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if is_namedtuple(structure) and not isinstance(key, str):
            if (i := normalize_index(key, len(structure))) is None:
                return NotFound(key, optic)
            return Found(structure[i])
        if key not in record_fields(structure):
            return NotFound(key, optic)
        return Found(getattr(structure, key))

    @classmethod
    def put(
        cls, structure: Any, key: Any, value: Any, /, *, optic: str = "lens"
    ) -> Result:
        if not cls.accepts(structure):
            return Unsupported(type(structure), optic)
        if is_namedtuple(structure) and not isinstance(key, str):
            if (i := normalize_index(key, len(structure))) is None:
                return NotFound(key, optic)
            key = structure._fields[i]
        if key not in record_fields(structure):
            return NotFound(key, optic)

        if isinstance(structure, BaseModel):
            return Found(structure.model_copy(update={key: value}))
        if is_namedtuple(structure):
            return Found(structure._replace(**{key: value}))

        field = next(f for f in dataclasses.fields(structure) if f.name == key)
        if field.init:
            return Found(dataclasses.replace(structure, **{key: value}))
        # init=False fields cannot go through replace()
        new = copy.copy(structure)
        object.__setattr__(new, key, value)
        return Found(new)

    @classmethod
    def keys(cls, structure: Any, /) -> list[str]:
        return list(record_fields(structure))
