"""
types.py
- Purpose: The two values validators work with: the attachment's metadata
  (FileHeader) and the field-keyed message accumulator (ValidationErrors).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from starlette.datastructures import MutableHeaders, UploadFile


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_WORD = re.compile(r"[^0-9a-zA-Z]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_int(raw: str) -> int:
    """
    Strict decimal parse for header values.

    Unlike int(), rejects surrounding whitespace, underscores and non-ASCII digits.
    """
    if not _DECIMAL.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def generate_key(field_name: str) -> str:
    """
    Normalize a form field name into the key validation messages are stored under.

    "File" -> "file", "AvatarImage" -> "avatar_image", "user-photo" -> "user_photo"
    """
    spaced = _CAMEL_BOUNDARY.sub("_", field_name.strip())
    return _NON_WORD.sub("_", spaced).strip("_").lower()


@dataclass
class FileHeader:
    """
    Metadata of one multipart attachment.

    `headers` are the part headers (case-insensitive). They are a private copy,
    so the pipeline may record a resolved Content-Length without touching the
    request.
    """

    filename: str
    headers: MutableHeaders = field(default_factory=MutableHeaders)

    @classmethod
    def from_upload(cls, upload: UploadFile) -> "FileHeader":
        return cls(
            filename=os.path.basename(upload.filename or ""),
            headers=MutableHeaders(raw=list(upload.headers.raw)),
        )

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    @property
    def content_length(self) -> str:
        return self.headers.get("content-length", "")


class ValidationErrors:
    """Field key -> list of human-readable messages. Empty means valid."""

    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add(self, key: str, msg: str) -> None:
        self._errors.setdefault(key, []).append(msg)

    def append(self, other: "ValidationErrors") -> None:
        for key, messages in other._errors.items():
            for msg in messages:
                self.add(key, msg)

    def get(self, key: str) -> List[str]:
        return list(self._errors.get(key, []))

    def keys(self) -> List[str]:
        return list(self._errors)

    def has_any(self) -> bool:
        return bool(self._errors)

    def count(self) -> int:
        return sum(len(v) for v in self._errors.values())

    def to_dict(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._errors.items()}

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValidationErrors):
            return self._errors == other._errors
        if isinstance(other, dict):
            return self._errors == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"
