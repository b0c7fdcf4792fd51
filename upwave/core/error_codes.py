# upwave/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Upload pipeline
    FORM_PARSE_FAILED = "FORM_PARSE_FAILED"
    INVALID_CONTENT_LENGTH = "INVALID_CONTENT_LENGTH"
    FILE_SIZE_UNKNOWN = "FILE_SIZE_UNKNOWN"

    # Object store
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    STORAGE_UPLOAD_FAILED = "STORAGE_UPLOAD_FAILED"
