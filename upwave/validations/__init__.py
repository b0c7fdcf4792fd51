from upwave.validations.types import FileHeader, ValidationErrors, generate_key, parse_int
from upwave.validations.file_validators import FileTypeValidator, MaxFileSizeValidator, format_size, validate

__all__ = [
    "FileHeader",
    "ValidationErrors",
    "generate_key",
    "parse_int",
    "FileTypeValidator",
    "MaxFileSizeValidator",
    "format_size",
    "validate",
]
