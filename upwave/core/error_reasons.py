"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; they may be surfaced to API clients.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    NOT_MULTIPART = "Request is not multipart/form-data"
    MALFORMED_FORM = "Malformed multipart body"
    INVALID_CONTENT_LENGTH = "Invalid content length"
    UNSEEKABLE_STREAM = "Upload stream is not seekable"

    STORAGE_UNAVAILABLE = "Storage unavailable"
    UPLOAD_FAILED = "upload failed"
    INTERNAL_ERROR = "Internal server error"
