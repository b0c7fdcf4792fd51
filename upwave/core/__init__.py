# upwave/core/__init__.py
from upwave.core.errors import AppError
from upwave.core.error_codes import ErrorCode
from upwave.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
