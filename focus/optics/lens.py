# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Total optics over a single key, field or position.

Example:
    >>> person = {"name": "Homer", "address": {"street": "Fake St."}}
    >>> make_lens("name").view(person)
    Found(value='Homer')
    >>> (make_lens("address") >> make_lens("street")).set(person, "Evergreen")
    Found(value={'name': 'Homer', 'address': {'street': 'Evergreen'}})
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from numbers import Integral
from typing import Any, ClassVar

from typing_extensions import override

from .. import config
from .._errors import UnsupportedShapeError, ValidationError
from ..adapters import AdapterRegistry, default_registry
from ..types import NotFound, Result
from .optic import Optic

__all__ = (
    "Lens",
    "Lenses",
    "idx",
    "make_lens",
    "make_lenses",
    "path",
)


def _default_registry() -> AdapterRegistry:
    return default_registry


def _none_as_missing() -> bool:
    return config.settings.NONE_AS_MISSING


@dataclass(slots=True, frozen=True)
class Lens(Optic):
    """Optic focused on one key of a mapping, record, list or tuple.

    The key is expected to exist in well-formed input. A missing key is
    reported as ``NotFound`` and ``set`` never inserts it.
    """

    key: Any
    none_as_missing: bool = field(
        default_factory=_none_as_missing, repr=False, compare=False
    )
    registry: AdapterRegistry = field(
        default_factory=_default_registry, repr=False, compare=False
    )

    kind: ClassVar[str] = "lens"

    @override
    def get(self, structure: Any, /) -> Result:
        result = self.registry.get_in(structure, self.key, optic=self.kind)
        if self.none_as_missing and result and result.value is None:
            return NotFound(self.key, self.kind)
        return result

    @override
    def put(self, structure: Any, value: Any, /) -> Result:
        return self.registry.put_in(structure, self.key, value, optic=self.kind)

    @classmethod
    def idx(cls, n: int, /) -> Lens:
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise ValidationError.from_value(n, expected="int")
        return cls(int(n))


class Lenses(Mapping):
    """Read-only ``key -> Lens`` mapping that also allows attribute access.

    Example:
        >>> lenses = make_lenses({"name": "Homer", "age": 39})
        >>> lenses.name == lenses["name"] == Lens("name")
        True
    """

    __slots__ = ("_lenses",)

    def __init__(self, lenses: Mapping[Any, Lens]) -> None:
        self._lenses = dict(lenses)

    def __getitem__(self, key: Any) -> Lens:
        return self._lenses[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._lenses)

    def __len__(self) -> int:
        return len(self._lenses)

    def __getattr__(self, name: str) -> Lens:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._lenses[name]
        except KeyError:
            raise AttributeError(
                f"No lens for {name!r}; available: {list(self._lenses)}"
            ) from None

    def __repr__(self) -> str:
        return f"Lenses({list(self._lenses)!r})"


def make_lens(key: Any, /) -> Lens:
    return Lens(key)


def idx(n: int, /) -> Lens:
    """Lens on position ``n`` of a list or tuple."""
    return Lens.idx(n)


def make_lenses(
    structure: Any, /, *, registry: AdapterRegistry | None = None
) -> Lenses:
    """Build one lens per key of ``structure``.

    Raises:
        UnsupportedShapeError: If no adapter handles ``structure``.
    """
    registry = registry or default_registry
    adapter_cls = registry.resolve(structure)
    if adapter_cls is None:
        raise UnsupportedShapeError(
            f"Cannot derive lenses from {type(structure).__name__}",
            details={"shape": type(structure).__name__},
        )
    return Lenses(
        {key: Lens(key, registry=registry) for key in adapter_cls.keys(structure)}
    )


def path(*keys: Any) -> Optic:
    """Compose one lens per key, outermost first."""
    if not keys:
        raise ValidationError("path() needs at least one key")
    optic: Optic = Lens(keys[0])
    for key in keys[1:]:
        optic = optic >> Lens(key)
    return optic
