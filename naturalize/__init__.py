"""Top-level package for Naturalize.

This package rewrites strings into sort keys whose lexicographic order matches
the natural numeric order of embedded numbers. The main entry point is
`to_natural`.
"""

from loguru import logger

from .errors import NaturalizeError
from .natural import (
    PAD_WIDTH,
    TextSpan,
    is_ascii_digit,
    iter_spans,
    natural_key,
    natural_sorted,
    pad_digit_run,
    to_natural,
)

logger.disable(__name__)

__all__ = [
    "NaturalizeError",
    "PAD_WIDTH",
    "TextSpan",
    "is_ascii_digit",
    "iter_spans",
    "natural_key",
    "natural_sorted",
    "pad_digit_run",
    "to_natural",
    "__version__",
]

__version__ = "0.1.0"
