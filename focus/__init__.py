# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import (
    FocusError,
    NotFoundError,
    UnsupportedShapeError,
    ValidationError,
)
from .adapters import AdapterRegistry, default_registry, register_adapter
from . import functorial
from .config import settings
from .operations import (
    alongside,
    compose,
    fix_over,
    fix_set,
    fix_view,
    has,
    hasnt,
    map,
    over,
    set,
    view,
    view_list,
)
from .optics import (
    Alongside,
    Composed,
    Lens,
    Lenses,
    Optic,
    Prism,
    Variant,
    error,
    make_lens,
    make_lenses,
    make_prism,
    ok,
    path,
)
from .optics.lens import idx
from .optics.prism import idx as prism_idx
from .records import RecordLenses, deflenses
from .types import Found, NotFound, Result, Undefined, Unset, Unsupported
from .version import __version__

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = (
    "__version__",
    "AdapterRegistry",
    "Alongside",
    "Composed",
    "FocusError",
    "Found",
    "Lens",
    "Lenses",
    "NotFound",
    "NotFoundError",
    "Optic",
    "Prism",
    "RecordLenses",
    "Result",
    "Undefined",
    "Unset",
    "Unsupported",
    "UnsupportedShapeError",
    "ValidationError",
    "Variant",
    "alongside",
    "compose",
    "default_registry",
    "deflenses",
    "error",
    "fix_over",
    "fix_set",
    "fix_view",
    "functorial",
    "has",
    "hasnt",
    "idx",
    "logger",
    "make_lens",
    "make_lenses",
    "make_prism",
    "map",
    "ok",
    "over",
    "path",
    "prism_idx",
    "register_adapter",
    "set",
    "settings",
    "view",
    "view_list",
)
