# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Three-state outcome of reading or writing through an optic.

Design: absence is carried by its own type instead of overloading the value
with None, so a legitimately stored None is ``Found(None)``.

- ``Found(value)``: the focus exists (truthy)
- ``NotFound(key, optic)``: key, index or variant tag is absent (falsy)
- ``Unsupported(shape, optic)``: the container kind cannot be accessed (falsy)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, Union

from .._errors import NotFoundError, UnsupportedShapeError
from ._sentinel import T, Undefined, is_undefined

__all__ = (
    "Failure",
    "Found",
    "NotFound",
    "Result",
    "Unsupported",
    "is_failure",
    "is_result",
)

OpticKind = Literal["lens", "prism", "bind"]


@dataclass(slots=True, frozen=True)
class Found(Generic[T]):
    """A successfully read value, or a successfully rebuilt structure."""

    value: T
    is_found: ClassVar[bool] = True

    def __bool__(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def map(self, f: Callable[[T], Any]) -> Found:
        return Found(f(self.value))

    def bind(self, f: Callable[[T], Result]) -> Result:
        return f(self.value)

    def to_tuple(self) -> tuple[str, T]:
        return ("ok", self.value)


class _FailureMixin:
    """Shared behaviour of the two failure results."""

    __slots__ = ()
    is_found: ClassVar[bool] = False
    reason: ClassVar[str]

    def __bool__(self) -> Literal[False]:
        return False

    def unwrap_or(self, default: Any) -> Any:
        return default

    def map(self, f: Callable[[Any], Any]):
        return self

    def bind(self, f: Callable[[Any], Result]):
        return self

    def to_tuple(self) -> tuple[str, tuple[str, str]]:
        return ("error", (self.optic, self.reason))


@dataclass(slots=True, frozen=True)
class NotFound(_FailureMixin):
    """The focused key, index or tag does not exist in the structure."""

    key: Any = Undefined
    optic: OpticKind = "lens"
    reason: ClassVar[str] = "bad_path"

    def unwrap(self):
        if is_undefined(self.key):
            raise NotFoundError(
                f"{self.optic} focus not found", details={"optic": self.optic}
            )
        raise NotFoundError(
            f"{self.optic} path {self.key!r} not found",
            details={"key": self.key, "optic": self.optic},
        )


@dataclass(slots=True, frozen=True)
class Unsupported(_FailureMixin):
    """The structure's container kind does not support optic access."""

    shape: type | None = None
    optic: OpticKind = "lens"
    reason: ClassVar[str] = "bad_data_structure"

    def unwrap(self):
        name = self.shape.__name__ if self.shape is not None else "None"
        raise UnsupportedShapeError(
            f"{self.optic} cannot focus into {name}",
            details={"shape": name, "optic": self.optic},
        )


Failure = Union[NotFound, Unsupported]
Result = Union[Found[T], NotFound, Unsupported]


def is_result(value: Any) -> bool:
    return isinstance(value, (Found, NotFound, Unsupported))


def is_failure(value: Any) -> bool:
    return isinstance(value, (NotFound, Unsupported))
