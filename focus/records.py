# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Define a record type together with one lens per field.

    >>> Person = deflenses("Person", ["name", "age"])
    >>> homer = Person.new(name="Homer", age=39)
    >>> Person.lenses.name.view(homer)
    Found(value='Homer')

Records can be plain dataclasses (default) or pydantic models. This is a
one-time setup helper; optics built here are ordinary ``Lens`` values.
"""

from __future__ import annotations

import copy
import dataclasses
import keyword
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import ConfigDict, create_model

from ._errors import ValidationError
from .optics import Lens, Lenses

__all__ = ("RecordLenses", "deflenses")

RecordKind = Literal["dataclass", "pydantic"]


@dataclass(slots=True, frozen=True)
class RecordLenses:
    """A generated record type and the lenses over its fields."""

    record_type: type
    lenses: Lenses

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self.lenses)

    def new(self, **values: Any) -> Any:
        """Instantiate the record type."""
        return self.record_type(**values)


def _validate_fields(fields: Sequence[str]) -> tuple[str, ...]:
    if isinstance(fields, str):
        raise ValidationError.from_value(fields, expected="sequence of field names")
    names = tuple(fields)
    if not names:
        raise ValidationError("deflenses() needs at least one field")
    for name in names:
        if (
            not isinstance(name, str)
            or not name.isidentifier()
            or keyword.iskeyword(name)
            or name.startswith("_")
        ):
            raise ValidationError.from_value(name, expected="public identifier")
    if len(set(names)) != len(names):
        raise ValidationError.from_value(names, expected="unique field names")
    return names


def _dataclass_field(name: str, defaults: Mapping[str, Any]) -> tuple:
    if name not in defaults:
        return (name, Any)
    default = defaults[name]
    if isinstance(default, (list, dict, set)):
        return (
            name,
            Any,
            dataclasses.field(default_factory=lambda d=default: copy.copy(d)),
        )
    return (name, Any, dataclasses.field(default=default))


def deflenses(
    name: str,
    fields: Sequence[str],
    /,
    *,
    kind: RecordKind = "dataclass",
    frozen: bool = True,
    defaults: Mapping[str, Any] | None = None,
) -> RecordLenses:
    """Build a record type named ``name`` plus a lens for each field.

    Args:
        name: Class name of the generated record.
        fields: Field names, in declaration order.
        kind: ``"dataclass"`` or ``"pydantic"``.
        frozen: Make instances immutable.
        defaults: Optional default value per field.

    Raises:
        ValidationError: On an invalid or duplicate field name, a default
            for an unknown field, or an unknown ``kind``.
    """
    names = _validate_fields(fields)
    defaults = dict(defaults or {})
    if unknown := [k for k in defaults if k not in names]:
        raise ValidationError.from_value(unknown, expected=f"fields of {name}")

    if kind == "dataclass":
        # keyword-only, so defaulted fields may precede required ones
        record_type = dataclasses.make_dataclass(
            name,
            [_dataclass_field(n, defaults) for n in names],
            frozen=frozen,
            kw_only=True,
        )
    elif kind == "pydantic":
        record_type = create_model(
            name,
            __config__=ConfigDict(frozen=frozen, arbitrary_types_allowed=True),
            **{n: (Any, defaults.get(n, ...)) for n in names},
        )
    else:
        raise ValidationError.from_value(kind, expected="'dataclass' or 'pydantic'")

    return RecordLenses(
        record_type=record_type,
        lenses=Lenses({n: Lens(n) for n in names}),
    )
