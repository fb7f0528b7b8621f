# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Function-style surface over any optic.

Every function takes the optic first and dispatches to it, so lenses,
prisms and composed optics are used the same way:

    >>> from focus import idx, make_lens, over, view
    >>> homer = {"name": "Homer", "children": ["Bart", "Lisa"]}
    >>> view(make_lens("children") >> idx(1), homer)
    Found(value='Lisa')
    >>> over(make_lens("name"), homer, str.upper).value["name"]
    'HOMER'

Note: this module defines ``set`` and ``map``; the builtins of the same
names are not used here.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .optics import Alongside, Optic
from .optics import compose as _compose
from .optics.optic import identity
from .types import Result

__all__ = (
    "alongside",
    "compose",
    "fix_over",
    "fix_set",
    "fix_view",
    "has",
    "hasnt",
    "map",
    "over",
    "set",
    "view",
    "view_list",
)


def _ensure_optic(optic: Any) -> Optic:
    if not isinstance(optic, Optic):
        raise TypeError(f"Expected an optic, got {type(optic).__name__}")
    return optic


def view(optic: Optic, structure: Any, /) -> Result:
    """Read the focus of ``optic`` in ``structure``.

    Returns ``Found``, ``NotFound`` or ``Unsupported`` (a pair of those
    for an ``Alongside``).
    """
    return _ensure_optic(optic).view(structure)


def over(optic: Optic, structure: Any, f: Callable[[Any], Any], /) -> Result:
    """Apply ``f`` to the focus; ``f`` is not called if the focus is missing."""
    return _ensure_optic(optic).over(structure, f)


def set(optic: Optic, structure: Any, value: Any, /) -> Result:
    """Replace the focus with ``value``; never inserts a missing key."""
    return _ensure_optic(optic).set(structure, value)


def compose(*optics: Optic) -> Optic:
    return _compose(*optics)


def alongside(first: Optic, second: Optic, /) -> Alongside:
    return Alongside(first, second)


def has(optic: Optic, structure: Any, /) -> bool:
    return _ensure_optic(optic).has(structure)


def hasnt(optic: Optic, structure: Any, /) -> bool:
    return _ensure_optic(optic).hasnt(structure)


def view_list(optics: Iterable[Optic], structure: Any, /) -> list[Result]:
    """View ``structure`` through each optic, keeping the order of ``optics``."""
    return [view(optic, structure) for optic in optics]


def map(
    optic: Optic, f: Callable[[Any], Any], structures: Iterable[Any], /
) -> list[Any]:
    """Apply ``f`` to the focus of every structure that has it.

    Structures lacking the focus are passed through unchanged, so the
    collection may be heterogeneous.
    """
    _ensure_optic(optic)
    if isinstance(optic, Alongside):
        raise TypeError("map() cannot rebuild structures through alongside()")
    out = []
    for structure in structures:
        result = optic.over(structure, f)
        out.append(result.value if result else structure)
    return out


def fix_view(optic: Optic, /) -> Callable[[Any], Result]:
    return _ensure_optic(optic).fix_view()


def fix_over(
    optic: Optic, f: Callable[[Any], Any] = identity, /
) -> Callable[[Any], Result]:
    return _ensure_optic(optic).fix_over(f)


def fix_set(optic: Optic, /) -> Callable[[Any, Any], Result]:
    return _ensure_optic(optic).fix_set()
