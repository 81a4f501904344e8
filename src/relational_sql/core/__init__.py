"""Core SQL utilities package."""

from .identifier import qualify_table, quote_identifier
from .parameters import (
    PLACEHOLDER_STYLES,
    build_parameter_associations,
    format_placeholder,
)

__all__ = [
    "quote_identifier",
    "qualify_table",
    "PLACEHOLDER_STYLES",
    "build_parameter_associations",
    "format_placeholder",
]
