# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from .adapter import AdapterRegistry, ContainerAdapter, normalize_index
from .keyword_adapter import KeywordAdapter, is_keyword_sequence
from .mapping_adapter import MappingAdapter
from .record_adapter import RecordAdapter, is_namedtuple, record_fields
from .sequence_adapter import SequenceAdapter
from .tuple_adapter import TupleAdapter

__all__ = (
    "AdapterRegistry",
    "ContainerAdapter",
    "KeywordAdapter",
    "MappingAdapter",
    "RecordAdapter",
    "SequenceAdapter",
    "TupleAdapter",
    "default_registry",
    "is_keyword_sequence",
    "is_namedtuple",
    "normalize_index",
    "record_fields",
    "register_adapter",
)

# more specific kinds first: namedtuples before tuples, pairs before lists
default_registry = AdapterRegistry()
for _adapter in (
    RecordAdapter,
    MappingAdapter,
    KeywordAdapter,
    SequenceAdapter,
    TupleAdapter,
):
    default_registry.register(_adapter)
del _adapter


def register_adapter(
    adapter_cls: type[ContainerAdapter], *, first: bool = True
) -> None:
    """Attach an adapter for a new container kind to the default registry.

    User adapters are tried before the built-ins unless ``first`` is False.
    """
    default_registry.register(adapter_cls, first=first)
