"""
errors.py
- Purpose: AppError used across the pipeline and storage adapters for consistent errors.
- Pattern: raise AppError(...) from the cause; the handler converts it to a JSON response.
- Validation failures are NOT AppErrors, they are returned as ValidationErrors.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status

from upwave.core.error_codes import ErrorCode
from upwave.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message or self.reason}"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


def bad_request(reason: ErrorReason = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, details: dict | None = None) -> AppError:
    return AppError(code=code, reason=reason.value, status_code=http_status.HTTP_400_BAD_REQUEST, details=details)


def storage_error(reason: ErrorReason = ErrorReason.UPLOAD_FAILED, *, code: ErrorCode = ErrorCode.STORAGE_UPLOAD_FAILED, message: str | None = None, details: dict | None = None) -> AppError:
    return AppError(
        code=code,
        reason=reason.value,
        status_code=http_status.HTTP_502_BAD_GATEWAY,
        details=details,
        message=message,
    )
