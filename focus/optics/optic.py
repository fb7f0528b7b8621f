# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from ..types import Result, Unset, is_unset

if TYPE_CHECKING:
    from .composed import Alongside

__all__ = ("Optic", "identity")


def identity(x: Any) -> Any:
    return x


class Optic(ABC):
    """A composable getter/setter pair focused on part of a structure.

    Subclasses provide the raw ``get``/``put`` pair. Everything else
    (view, set, over, composition) is derived here, so every optic shares
    the same failure discipline: ``set`` and ``over`` read first and return
    the read failure untouched, without calling the update function.

    Optics hold only an access path, never a structure, and are immutable.
    """

    __slots__ = ()

    kind: ClassVar[str] = "lens"

    @abstractmethod
    def get(self, structure: Any, /) -> Result:
        """Read the focus of ``structure``."""

    @abstractmethod
    def put(self, structure: Any, value: Any, /) -> Result:
        """Copy ``structure`` with its focus replaced by ``value``."""

    # ------------------------------------------------------------------ #
    # application                                                        #
    # ------------------------------------------------------------------ #
    def view(self, structure: Any, /) -> Result:
        return self.get(structure)

    def view_or_raise(self, structure: Any, /, default: Any = Unset) -> Any:
        """Return the raw focused value, or ``default`` if given and missing.

        Raises:
            NotFoundError: If the focus does not exist and no default is given.
            UnsupportedShapeError: If the structure cannot be accessed and no
                default is given.
        """
        result = self.view(structure)
        if not result and not is_unset(default):
            return default
        return result.unwrap()

    def set(self, structure: Any, value: Any, /) -> Result:
        current = self.get(structure)
        if not current:
            return current
        return self.put(structure, value)

    def over(self, structure: Any, f: Callable[[Any], Any], /) -> Result:
        current = self.get(structure)
        if not current:
            return current
        return self.put(structure, f(current.value))

    def has(self, structure: Any, /) -> bool:
        return bool(self.view(structure))

    def hasnt(self, structure: Any, /) -> bool:
        return not self.has(structure)

    # ------------------------------------------------------------------ #
    # partial application                                                #
    # ------------------------------------------------------------------ #
    def fix_view(self) -> Callable[[Any], Result]:
        def _view(structure: Any) -> Result:
            return self.view(structure)

        return _view

    def fix_over(
        self, f: Callable[[Any], Any] = identity
    ) -> Callable[[Any], Result]:
        def _over(structure: Any) -> Result:
            return self.over(structure, f)

        return _over

    def fix_set(self) -> Callable[[Any, Any], Result]:
        def _set(structure: Any, value: Any) -> Result:
            return self.set(structure, value)

        return _set

    # ------------------------------------------------------------------ #
    # composition                                                        #
    # ------------------------------------------------------------------ #
    def compose(self, other: Optic, /, *more: Optic) -> Optic:
        """Focus ``other`` inside the focus of ``self``."""
        from .composed import compose

        return compose(self, other, *more)

    def __rshift__(self, other: Optic) -> Optic:
        # a >> b reads as "a, then b inside it"
        if not isinstance(other, Optic):
            return NotImplemented
        return self.compose(other)

    def alongside(self, other: Optic, /) -> Alongside:
        from .composed import Alongside

        return Alongside(self, other)
