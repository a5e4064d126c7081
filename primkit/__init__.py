"""primkit: string, sequence and object utilities."""

from primkit.clone import StructuralCloner, clone
from primkit.numbers import is_nan
from primkit.sequences import clone_sequence, first, int_range, last, take
from primkit.text import (
    Named,
    PatternTrimmer,
    Positional,
    TemplateFormatter,
    capitalize,
    contains,
    ends_with,
    format_template,
    named,
    positional,
    reverse,
    trim,
    trim_end,
    trim_start,
)


__version__ = "0.1.0"

__all__ = [
    "Named",
    "PatternTrimmer",
    "Positional",
    "StructuralCloner",
    "TemplateFormatter",
    "capitalize",
    "clone",
    "clone_sequence",
    "contains",
    "ends_with",
    "first",
    "format_template",
    "int_range",
    "is_nan",
    "last",
    "named",
    "positional",
    "reverse",
    "take",
    "trim",
    "trim_end",
    "trim_start",
    "__version__",
]
