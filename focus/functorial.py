# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Small function combinators that work with optic results.

``bind`` threads a plain function through a ``Found``/failure result, which
is how optic reads are chained outside of composition:

    >>> name_len = bind(len)
    >>> name_len(Found("Homer"))
    Found(value=5)

A failed read passes through ``name_len`` unchanged.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from .types import Found, Result, Unsupported, is_result

__all__ = (
    "bind",
    "compose",
    "curry",
    "flip",
    "kleisli",
    "lift",
)


def compose(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Right to left function composition: ``compose(f, g)(x) == f(g(x))``."""

    def _composed(arg: Any) -> Any:
        return f(g(arg))

    return _composed


def curry(f: Callable[..., Any]) -> Callable[..., Any]:
    """Turn ``f(a, b, c)`` into ``f(a)(b)(c)``.

    Arity is the number of required positional parameters of ``f``.
    """
    arity = sum(
        1
        for p in inspect.signature(f).parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )

    def _curried(args: tuple, remaining: int):
        if remaining == 0:
            return f(*args)
        return lambda arg: _curried((*args, arg), remaining - 1)

    return _curried((), arity)


def lift(x: Any) -> Found:
    """Wrap a plain value as a successful result."""
    return Found(x)


def _bind_one(f: Callable[[Any], Any], result: Any) -> Result:
    if not is_result(result):
        return Unsupported(type(result), "bind")
    return result.map(f)


def bind(
    g: Callable[[Any], Any], f: Callable[[Any], Any] | None = None
) -> Callable[[Any], Result]:
    """Lift a plain function over results.

    ``bind(f)`` maps ``f`` over a result. ``bind(g, f)`` first calls ``g``
    on the raw argument, then maps ``f`` over what ``g`` returned. Failures
    pass through untouched; a non-result becomes ``Unsupported``.
    """
    if f is None:
        return lambda x: _bind_one(g, x)
    return lambda x: _bind_one(f, g(x))


def kleisli(
    f: Callable[[Any], Result], g: Callable[[Any], Any]
) -> Callable[[Any], Result]:
    """Run ``f`` (which returns a result) then map ``g`` over it."""
    return compose(bind(g), f)


def flip(f: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Swap the two arguments of ``f``."""

    def _flipped(x: Any, y: Any) -> Any:
        return f(y, x)

    return _flipped
