# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Sequential and parallel composition of optics."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from typing_extensions import override

from .._errors import ValidationError
from ..types import Found, Result, Unset
from .optic import Optic

__all__ = ("Alongside", "Composed", "compose")


def _put_chain(parts: Sequence[Optic], structure: Any, value: Any) -> Result:
    head, rest = parts[0], parts[1:]
    if not rest:
        return head.put(structure, value)
    inner = head.get(structure)
    if not inner:
        return inner
    updated = _put_chain(rest, inner.value, value)
    if not updated:
        return updated
    return head.put(structure, updated.value)


@dataclass(slots=True, frozen=True)
class Composed(Optic):
    """Chain of optics, each focusing inside the previous one's focus.

    Chains are kept flat, so ``(a >> b) >> c`` and ``a >> (b >> c)`` are
    equal. The first failing stage ends a read or write and its failure is
    returned as is.
    """

    parts: tuple[Optic, ...]

    @property
    def kind(self) -> str:
        return "prism" if any(p.kind == "prism" for p in self.parts) else "lens"

    @override
    def get(self, structure: Any, /) -> Result:
        result: Result = Found(structure)
        for optic in self.parts:
            result = optic.get(result.value)
            if not result:
                return result
        return result

    @override
    def put(self, structure: Any, value: Any, /) -> Result:
        return _put_chain(self.parts, structure, value)


@dataclass(slots=True, frozen=True)
class Alongside(Optic):
    """Two optics applied side by side to the same structure.

    ``view`` yields ``(view(first, s), view(second, s))``. ``set`` and
    ``over`` update each side independently and return both results; the
    two updated structures are never merged back into one.
    """

    first: Optic
    second: Optic

    kind = "alongside"

    def __post_init__(self):
        for optic in (self.first, self.second):
            if not isinstance(optic, Optic):
                raise TypeError(
                    f"alongside() expects optics, got {type(optic).__name__}"
                )

    @override
    def get(self, structure: Any, /) -> tuple[Result, Result]:
        return (self.first.get(structure), self.second.get(structure))

    @override
    def put(self, structure: Any, value: Any, /) -> tuple[Result, Result]:
        return (
            self.first.put(structure, value),
            self.second.put(structure, value),
        )

    @override
    def view(self, structure: Any, /) -> tuple[Result, Result]:
        return (self.first.view(structure), self.second.view(structure))

    @override
    def view_or_raise(
        self, structure: Any, /, default: Any = Unset
    ) -> tuple[Any, Any]:
        return (
            self.first.view_or_raise(structure, default),
            self.second.view_or_raise(structure, default),
        )

    @override
    def set(self, structure: Any, value: Any, /) -> tuple[Result, Result]:
        return (
            self.first.set(structure, value),
            self.second.set(structure, value),
        )

    @override
    def over(
        self, structure: Any, f: Callable[[Any], Any], /
    ) -> tuple[Result, Result]:
        return (self.first.over(structure, f), self.second.over(structure, f))

    @override
    def has(self, structure: Any, /) -> bool:
        return self.first.has(structure) and self.second.has(structure)


def compose(*optics: Optic) -> Optic:
    """Compose optics left to right, outermost first.

    An ``Alongside`` anywhere in the chain distributes over the rest:
    ``compose(a, alongside(b, c), d) == alongside(a >> b >> d, a >> c >> d)``.

    Raises:
        ValidationError: If no optic is given.
        TypeError: If an argument is not an optic.
    """
    if not optics:
        raise ValidationError("compose() needs at least one optic")
    for optic in optics:
        if not isinstance(optic, Optic):
            raise TypeError(f"compose() expects optics, got {type(optic).__name__}")

    for i, optic in enumerate(optics):
        if isinstance(optic, Alongside):
            before, after = optics[:i], optics[i + 1 :]
            return Alongside(
                compose(*before, optic.first, *after),
                compose(*before, optic.second, *after),
            )

    parts: list[Optic] = []
    for optic in optics:
        parts.extend(optic.parts if isinstance(optic, Composed) else (optic,))
    if len(parts) == 1:
        return parts[0]
    return Composed(tuple(parts))
