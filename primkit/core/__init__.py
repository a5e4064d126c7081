from primkit.core.constants import (
    CHARSET_SPECIAL_CHARS as CHARSET_SPECIAL_CHARS,
    DEFAULT_TRIM_CHARS as DEFAULT_TRIM_CHARS,
)
from primkit.core.exceptions import (
    ConfigurationError as ConfigurationError,
    PrimkitError as PrimkitError,
    TemplateArgumentError as TemplateArgumentError,
)
