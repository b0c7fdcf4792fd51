"""
file_validators.py
- Purpose: Composable checks against an attachment's declared metadata.
- Design: Each validator appends messages to a shared ValidationErrors keyed by
  the field name. They never raise; a bad upload is data, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Protocol

import humanize

from upwave.validations.types import FileHeader, ValidationErrors, generate_key, parse_int


def format_size(size: int) -> str:
    """
    Decimal byte size: one decimal below 10 units, none from 10 up.

    4_200_000 -> "4.2 MB", 10_000_000 -> "10 MB", 512 -> "512 Bytes"
    """
    scaled = float(abs(size))
    while scaled >= 1000:
        scaled /= 1000
    return humanize.naturalsize(size, format="%.1f" if scaled < 10 else "%.0f")


class Validator(Protocol):
    def is_valid(self, errors: ValidationErrors) -> None: ...


@dataclass
class FileTypeValidator:
    field: str
    allowed_types: AbstractSet[str]
    header: FileHeader

    def is_valid(self, errors: ValidationErrors) -> None:
        # Exact match on the declared type, no parameter stripping
        if self.header.content_type not in self.allowed_types:
            errors.add(generate_key(self.field), "not an allowed type")


@dataclass
class MaxFileSizeValidator:
    field: str
    max_size: int
    header: FileHeader

    def is_valid(self, errors: ValidationErrors) -> None:
        key = generate_key(self.field)
        try:
            size = parse_int(self.header.content_length)
        except ValueError:
            errors.add(key, "couldn't parse content length")
            return

        if size > self.max_size:
            errors.add(key, f"is too big {format_size(size)}")


def validate(*validators: Validator) -> ValidationErrors:
    """Run every validator against one fresh accumulator."""
    errors = ValidationErrors()
    for v in validators:
        v.is_valid(errors)
    return errors
