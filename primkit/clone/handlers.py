# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Built-in clone handlers, one per value kind.

The default dispatch order is defined by ``default_handlers``:

1. atomic values (primitives, enums, callables, modules) are shared
2. objects with a native deep-clone method clone themselves
3. date and time values are rebuilt from their fields
4. compiled regular expressions are recompiled
5. containers are rebuilt item by item
6. dataclasses are rebuilt through ``dataclasses.replace``
7. anything else gets a fresh instance with its attributes copied
"""

import dataclasses
import re
from array import array
from collections import defaultdict, deque
from collections.abc import Iterator, MutableMapping, MutableSequence
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import MappingProxyType, ModuleType, NoneType, SimpleNamespace
from typing import Any

from loguru import logger
from pydantic import BaseModel

from primkit.clone.protocols import CloneHandler, Recurse, SupportsCloneNode


ATOMIC_TYPES: tuple[type, ...] = (
    NoneType,
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    range,
    Enum,
    ModuleType,
    type(Ellipsis),
    type(NotImplemented),
)

_MISSING = object()


class AtomicHandler:
    """Shares immutable primitives, enum members, callables and modules."""

    name = "atomic"

    def matches(self, value: Any) -> bool:
        return isinstance(value, ATOMIC_TYPES) or callable(value)

    def clone(self, value: Any, recurse: Recurse) -> Any:
        return value


class NodeHandler:
    """Delegates to a native deep-clone method.

    Supports the DOM spelling ``cloneNode(deep)`` (``xml.dom.minidom``) and
    the Python spelling ``clone_node(deep=True)``.
    """

    name = "node"

    def matches(self, value: Any) -> bool:
        return callable(getattr(value, "cloneNode", None)) or isinstance(
            value, SupportsCloneNode
        )

    def clone(self, value: Any, recurse: Recurse) -> Any:
        if callable(getattr(value, "cloneNode", None)):
            return value.cloneNode(True)
        return value.clone_node(deep=True)


class PydanticModelHandler:
    """Deep-copies pydantic models through ``model_copy``."""

    name = "pydantic"

    def matches(self, value: Any) -> bool:
        return isinstance(value, BaseModel)

    def clone(self, value: Any, recurse: Recurse) -> Any:
        return value.model_copy(deep=True)


class DateTimeHandler:
    """Rebuilds date, time, datetime and timedelta values from their fields."""

    name = "datetime"

    def matches(self, value: Any) -> bool:
        return isinstance(value, (date, time, timedelta))

    def clone(self, value: Any, recurse: Recurse) -> Any:
        cls = type(value)
        # datetime subclasses date, so it is checked first
        if isinstance(value, datetime):
            return cls(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond,
                value.tzinfo,
                fold=value.fold,
            )
        if isinstance(value, date):
            return cls(value.year, value.month, value.day)
        if isinstance(value, time):
            return cls(
                value.hour,
                value.minute,
                value.second,
                value.microsecond,
                value.tzinfo,
                fold=value.fold,
            )
        return cls(days=value.days, seconds=value.seconds, microseconds=value.microseconds)


class PatternHandler:
    """Recompiles regular expressions from their source and flags.

    ``re`` caches compiled patterns, so the result can be the very same
    (immutable) object as the source.
    """

    name = "pattern"

    def matches(self, value: Any) -> bool:
        return isinstance(value, re.Pattern)

    def clone(self, value: Any, recurse: Recurse) -> Any:
        return re.compile(value.pattern, value.flags)


def _new_container(cls: type, fallback: type) -> Any:
    """Instantiate an empty container of ``cls``, or ``fallback`` if it needs arguments."""
    try:
        return cls()
    except (TypeError, ValueError):
        logger.debug(
            "Container constructor needs arguments, using fallback",
            kind=cls.__qualname__,
            fallback=fallback.__name__,
        )
        return fallback()


class MappingHandler:
    """Clones mappings value by value; keys are kept as-is."""

    name = "mapping"

    def matches(self, value: Any) -> bool:
        return isinstance(value, (MutableMapping, MappingProxyType))

    def clone(self, value: Any, recurse: Recurse) -> Any:
        if isinstance(value, MappingProxyType):
            return MappingProxyType({k: recurse(v) for k, v in value.items()})
        if isinstance(value, defaultdict):
            result = type(value)(value.default_factory)
        else:
            result = _new_container(type(value), dict)
        for key, item in value.items():
            result[key] = recurse(item)
        return result


class SequenceHandler:
    """Clones lists, deques, bytearrays, arrays and other mutable sequences."""

    name = "sequence"

    def matches(self, value: Any) -> bool:
        return isinstance(value, MutableSequence)

    def clone(self, value: Any, recurse: Recurse) -> Any:
        if isinstance(value, bytearray):
            return type(value)(value)
        if isinstance(value, array):
            return type(value)(value.typecode, value)
        if isinstance(value, deque):
            return type(value)((recurse(item) for item in value), value.maxlen)
        result = _new_container(type(value), list)
        result.extend(recurse(item) for item in value)
        return result


class TupleHandler:
    """Rebuilds tuples, including named tuples, from cloned items."""

    name = "tuple"

    def matches(self, value: Any) -> bool:
        return isinstance(value, tuple)

    def clone(self, value: Any, recurse: Recurse) -> Any:
        items = [recurse(item) for item in value]
        if hasattr(value, "_make"):
            return type(value)._make(items)
        return type(value)(items)


class SetHandler:
    """Rebuilds sets and frozensets from cloned members."""

    name = "set"

    def matches(self, value: Any) -> bool:
        return isinstance(value, (set, frozenset))

    def clone(self, value: Any, recurse: Recurse) -> Any:
        return type(value)(recurse(item) for item in value)


class DataclassHandler:
    """Rebuilds dataclass instances with cloned field values.

    Frozen dataclasses are supported; fields excluded from ``__init__`` are
    copied onto the new instance afterwards.
    """

    name = "dataclass"

    def matches(self, value: Any) -> bool:
        return dataclasses.is_dataclass(value) and not isinstance(value, type)

    def clone(self, value: Any, recurse: Recurse) -> Any:
        fields = dataclasses.fields(value)
        changes = {f.name: recurse(getattr(value, f.name)) for f in fields if f.init}
        result = dataclasses.replace(value, **changes)
        for f in fields:
            if not f.init and hasattr(value, f.name):
                object.__setattr__(result, f.name, recurse(getattr(value, f.name)))
        return result


def iter_attributes(value: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for instance attributes and populated slots.

    Slots are collected across the whole MRO, with private names mangled the
    way the interpreter stores them.
    """
    yield from list(getattr(value, "__dict__", {}).items())
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if slot.startswith("__") and not slot.endswith("__"):
                slot = f"_{klass.__name__.lstrip('_')}{slot}"
            attr = getattr(value, slot, _MISSING)
            if attr is not _MISSING:
                yield slot, attr


def instantiate(cls: type) -> Any:
    """Create an empty instance of ``cls`` to copy attributes into.

    Tries the no-argument constructor, then ``cls.__new__`` without running
    ``__init__``, then a plain ``SimpleNamespace`` record.
    """
    try:
        return cls()
    except Exception as e:
        logger.trace("No-argument constructor failed", kind=cls.__qualname__, error=type(e).__name__)
    try:
        instance = cls.__new__(cls)
    except TypeError:
        logger.debug("Cannot instantiate type, cloning into a plain record", kind=cls.__qualname__)
        return SimpleNamespace()
    logger.debug("Constructor unusable, skipped __init__", kind=cls.__qualname__)
    return instance


class ObjectHandler:
    """Fallback: fresh instance plus recursively cloned attributes.

    Attributes the fresh instance already holds as the identical object
    (class-level defaults, for example) are not written again.
    """

    name = "object"

    def matches(self, value: Any) -> bool:
        return True

    def clone(self, value: Any, recurse: Recurse) -> Any:
        result = instantiate(type(value))
        for name, attr in iter_attributes(value):
            if getattr(result, name, _MISSING) is attr:
                continue
            cloned = recurse(attr)
            try:
                setattr(result, name, cloned)
            except AttributeError:
                object.__setattr__(result, name, cloned)
        return result


def default_handlers() -> list[CloneHandler]:
    """Return a fresh list of the built-in handlers in dispatch order."""
    return [
        AtomicHandler(),
        NodeHandler(),
        PydanticModelHandler(),
        DateTimeHandler(),
        PatternHandler(),
        MappingHandler(),
        SequenceHandler(),
        TupleHandler(),
        SetHandler(),
        DataclassHandler(),
        ObjectHandler(),
    ]


