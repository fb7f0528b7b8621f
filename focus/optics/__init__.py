# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .composed import Alongside, Composed, compose
from .lens import Lens, Lenses, make_lens, make_lenses, path
from .optic import Optic, identity
from .prism import Prism, Variant, error, make_prism, ok

__all__ = (
    "Alongside",
    "Composed",
    "Lens",
    "Lenses",
    "Optic",
    "Prism",
    "Variant",
    "compose",
    "error",
    "identity",
    "make_lens",
    "make_lenses",
    "make_prism",
    "ok",
    "path",
)
