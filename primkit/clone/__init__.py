"""Structural deep cloning with pluggable per-kind handlers.

Example:
    >>> from primkit.clone import clone
    >>> data = {"items": [1, 2, 3]}
    >>> clone(data)["items"] is data["items"]
    False

Custom kinds:
    >>> from primkit.clone import get_default_cloner
    >>> get_default_cloner().register(MyHandler())
"""

from primkit.clone.cloner import StructuralCloner, clone, get_default_cloner
from primkit.clone.handlers import (
    AtomicHandler,
    DataclassHandler,
    DateTimeHandler,
    MappingHandler,
    NodeHandler,
    ObjectHandler,
    PatternHandler,
    PydanticModelHandler,
    SequenceHandler,
    SetHandler,
    TupleHandler,
    default_handlers,
)
from primkit.clone.protocols import CloneHandler, Recurse, SupportsCloneNode


__all__ = [
    # Entry points
    "StructuralCloner",
    "clone",
    "get_default_cloner",
    # Protocols
    "CloneHandler",
    "Recurse",
    "SupportsCloneNode",
    # Handlers
    "AtomicHandler",
    "DataclassHandler",
    "DateTimeHandler",
    "MappingHandler",
    "NodeHandler",
    "ObjectHandler",
    "PatternHandler",
    "PydanticModelHandler",
    "SequenceHandler",
    "SetHandler",
    "TupleHandler",
    "default_handlers",
]
