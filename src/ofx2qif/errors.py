"""Exceptions raised while converting OFX documents."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for conversion failures."""


class StructuralError(ConversionError):
    """Raised when aggregate nesting in the input is unbalanced or malformed."""


class FieldParseError(ConversionError):
    """Raised when a single field value cannot be normalized."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f'Unparsable {field} value: {value!r}')
        self.field = field
        self.value = value
