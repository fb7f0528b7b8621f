# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Container *Adapter* abstraction and *AdapterRegistry*.

An *adapter* gives optics raw get/put access to one kind of container
(mapping, list, tuple, record, ...).

Design goals
------------
* **Stateless** - all access logic is expressed as *class methods*.
* **Pluggable** - register new container kinds at runtime.
* **Uniform failure** - ``NotFound`` for a bad key, ``Unsupported`` for a
  container the adapter cannot handle; never an exception.
* **Non-creating** - ``put`` only replaces what ``get`` can already see.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, ClassVar, Protocol, runtime_checkable

from .. import config
from ..types import Result, Unsupported

__all__ = (
    "AdapterRegistry",
    "ContainerAdapter",
    "normalize_index",
)

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Adapter protocol                                                            #
# --------------------------------------------------------------------------- #
@runtime_checkable
class ContainerAdapter(Protocol):
    """A stateless get/put helper for one container kind.

    Each concrete adapter must declare a unique :pyattr:`kind`
    (e.g. ``"mapping"``, ``"sequence"``).

    Implementations *must* provide four classmethods:

    * :py:meth:`accepts` - whether the adapter handles ``structure``
    * :py:meth:`get`     - read the value at ``key``
    * :py:meth:`put`     - copy ``structure`` with the value at ``key`` replaced
    * :py:meth:`keys`    - the keys a lens can address in ``structure``
    """

    # unique identifier (e.g. "mapping", "tuple")
    kind: ClassVar[str]

    @classmethod
    def accepts(cls, structure: Any, /) -> bool: ...

    @classmethod
    def get(cls, structure: Any, key: Any, /, *, optic: str = "lens") -> Result: ...

    @classmethod
    def put(
        cls, structure: Any, key: Any, value: Any, /, *, optic: str = "lens"
    ) -> Result: ...

    @classmethod
    def keys(cls, structure: Any, /) -> list[Any]: ...


def normalize_index(key: Any, length: int) -> int | None:
    """Map ``key`` to a non-negative position below ``length``, or None.

    Booleans are not positions. Negative positions count from the end
    when ``settings.NEGATIVE_INDICES`` is on.
    """
    if isinstance(key, bool) or not isinstance(key, Integral):
        return None
    key = int(key)
    if key < 0:
        if not config.settings.NEGATIVE_INDICES:
            return None
        key += length
    return key if 0 <= key < length else None


# --------------------------------------------------------------------------- #
# Adapter registry                                                            #
# --------------------------------------------------------------------------- #
class AdapterRegistry:
    """Keeps an ordered mapping ``kind -> adapter_cls``.

    Resolution walks the adapters in order and picks the first one that
    accepts the structure, so more specific kinds must come first.
    """

    def __init__(self) -> None:
        self._reg: dict[str, type[ContainerAdapter]] = {}

    # --------------------------------------------------------------------- #
    # public API                                                            #
    # --------------------------------------------------------------------- #
    def register(
        self, adapter_cls: type[ContainerAdapter], *, first: bool = False
    ) -> None:
        key = getattr(adapter_cls, "kind", None)
        if not key:
            raise AttributeError("Adapter class must define 'kind' attribute")
        if key in self._reg:
            logger.warning(
                "Adapter for '%s' replaced: %s -> %s",
                key,
                self._reg[key],
                adapter_cls,
            )
        if first:
            rest = {k: v for k, v in self._reg.items() if k != key}
            self._reg = {key: adapter_cls, **rest}
        else:
            self._reg[key] = adapter_cls
        logger.debug("Registered %s adapter %s", key, adapter_cls.__name__)

    def unregister(self, kind: str) -> type[ContainerAdapter]:
        try:
            return self._reg.pop(kind)
        except KeyError as exc:
            raise KeyError(f"No adapter registered for '{kind}'") from exc

    def get(self, kind: str) -> type[ContainerAdapter]:
        try:
            return self._reg[kind]
        except KeyError as exc:
            raise KeyError(f"No adapter registered for '{kind}'") from exc

    def resolve(self, structure: Any, /) -> type[ContainerAdapter] | None:
        for adapter_cls in self._reg.values():
            if adapter_cls.accepts(structure):
                return adapter_cls
        return None

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._reg)

    def __contains__(self, kind: object) -> bool:
        return kind in self._reg

    def copy(self) -> AdapterRegistry:
        new = AdapterRegistry()
        new._reg = dict(self._reg)
        return new

    # convenience shortcuts
    def get_in(
        self, structure: Any, key: Any, /, *, optic: str = "lens"
    ) -> Result:
        adapter_cls = self.resolve(structure)
        if adapter_cls is None:
            return Unsupported(type(structure), optic)
        return adapter_cls.get(structure, key, optic=optic)

    def put_in(
        self, structure: Any, key: Any, value: Any, /, *, optic: str = "lens"
    ) -> Result:
        adapter_cls = self.resolve(structure)
        if adapter_cls is None:
            return Unsupported(type(structure), optic)
        return adapter_cls.put(structure, key, value, optic=optic)
