from sexpand.errors import (
    InvalidNumberError,
    MismatchedWidthError,
    MissingPlaceholderError,
    NestedBracketError,
    SexpandError,
    UnbalancedBracketError,
)
from sexpand.nodelist_parser import expand_hostnames, expand_range, pad_number
from sexpand.render import render

__version__ = "0.1.0"

__all__ = [
    "InvalidNumberError",
    "MismatchedWidthError",
    "MissingPlaceholderError",
    "NestedBracketError",
    "SexpandError",
    "UnbalancedBracketError",
    "expand_hostnames",
    "expand_range",
    "pad_number",
    "render",
]
