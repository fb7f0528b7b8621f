# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Partial optics: foci that may legitimately be absent.

Prisms cover list, key-labeled list and tuple positions, and the
``("ok", value)`` / ``("error", reason)`` tagged-tuple convention. An absent
focus is a normal ``NotFound`` outcome, never an exception.

Example:
    >>> ok().view(("ok", 5))
    Found(value=5)
    >>> ok().view(("error", "oops"))
    NotFound(key='ok', optic='prism')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, ClassVar

from typing_extensions import override

from .._errors import ValidationError
from ..adapters import AdapterRegistry, default_registry
from ..types import Found, NotFound, Result, Unsupported
from .optic import Optic

__all__ = (
    "Prism",
    "Variant",
    "error",
    "idx",
    "make_prism",
    "ok",
)

# container kinds a positional prism may focus into
PRISM_KINDS: tuple[str, ...] = ("keyword", "sequence", "tuple")


def _default_registry() -> AdapterRegistry:
    return default_registry


@dataclass(slots=True, frozen=True)
class Prism(Optic):
    """Optic on a list, key-labeled list or tuple position that may be absent."""

    path: Any
    registry: AdapterRegistry = field(
        default_factory=_default_registry, repr=False, compare=False
    )

    kind: ClassVar[str] = "prism"

    def _adapter(self, structure: Any):
        adapter_cls = self.registry.resolve(structure)
        if adapter_cls is None or adapter_cls.kind not in PRISM_KINDS:
            return None
        return adapter_cls

    @override
    def get(self, structure: Any, /) -> Result:
        if (adapter_cls := self._adapter(structure)) is None:
            return Unsupported(type(structure), self.kind)
        return adapter_cls.get(structure, self.path, optic=self.kind)

    @override
    def put(self, structure: Any, value: Any, /) -> Result:
        if (adapter_cls := self._adapter(structure)) is None:
            return Unsupported(type(structure), self.kind)
        return adapter_cls.put(structure, self.path, value, optic=self.kind)

    @classmethod
    def idx(cls, n: int, /) -> Prism:
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise ValidationError.from_value(n, expected="int")
        return cls(int(n))


def _is_tagged(structure: Any) -> bool:
    return (
        isinstance(structure, tuple)
        and len(structure) == 2
        and isinstance(structure[0], str)
    )


@dataclass(slots=True, frozen=True)
class Variant(Optic):
    """Prism matching a ``(tag, value)`` tuple with a given tag.

    Writing through a matched variant always yields ``(result_tag, value)``:
    the output is normalized to the success tag even when the matched
    input carried a failure tag.
    """

    tag: str
    result_tag: str = "ok"

    kind: ClassVar[str] = "prism"

    @override
    def get(self, structure: Any, /) -> Result:
        if not _is_tagged(structure):
            return Unsupported(type(structure), self.kind)
        if structure[0] != self.tag:
            return NotFound(self.tag, self.kind)
        return Found(structure[1])

    @override
    def put(self, structure: Any, value: Any, /) -> Result:
        if not _is_tagged(structure):
            return Unsupported(type(structure), self.kind)
        if structure[0] != self.tag:
            return NotFound(self.tag, self.kind)
        return Found((self.result_tag, value))


def make_prism(path: Any, /) -> Prism:
    return Prism(path)


def idx(n: int, /) -> Prism:
    """Prism on position ``n``; out-of-range positions are ``NotFound``."""
    return Prism.idx(n)


def ok() -> Variant:
    """Prism matching ``("ok", value)``."""
    return Variant("ok")


def error() -> Variant:
    """Prism matching ``("error", reason)``; writes produce ``("ok", value)``."""
    return Variant("error", result_tag="ok")
