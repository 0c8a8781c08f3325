"""Message template types and raw-value conversion.

Python 3.13+. Zero external dependencies.
"""

from .model import ArgRef, Fragment, Literal, PlainTemplate, StructuredTemplate, Template
from .parsing import parse_fragment, parse_template

__all__ = [
    "ArgRef",
    "Fragment",
    "Literal",
    "PlainTemplate",
    "StructuredTemplate",
    "Template",
    "parse_fragment",
    "parse_template",
]
