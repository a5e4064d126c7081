"""String utilities: trimming, templating and small helpers."""

from primkit.text.helpers import capitalize, contains, ends_with, reverse
from primkit.text.template import (
    Named,
    Positional,
    TemplateArguments,
    TemplateFormatter,
    arguments_from,
    format_template,
    named,
    placeholders,
    positional,
)
from primkit.text.trim import (
    PatternTrimmer,
    compile_charset,
    escape_charset,
    trim,
    trim_end,
    trim_start,
)


__all__ = [
    # Trimming
    "PatternTrimmer",
    "compile_charset",
    "escape_charset",
    "trim",
    "trim_end",
    "trim_start",
    # Templates
    "Named",
    "Positional",
    "TemplateArguments",
    "TemplateFormatter",
    "arguments_from",
    "format_template",
    "named",
    "placeholders",
    "positional",
    # Helpers
    "capitalize",
    "contains",
    "ends_with",
    "reverse",
]
