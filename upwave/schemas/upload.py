"""
upload.py (schemas)
- Purpose: Response DTOs for the upload endpoint.
"""

from pydantic import BaseModel, Field

from upwave.validations.types import ValidationErrors


class UploadResponse(BaseModel):
    """
    Body of POST /api/uploads. `errors` is empty when the upload was stored
    (or when no file was attached).
    """
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def from_errors(cls, verrs: ValidationErrors) -> "UploadResponse":
        return cls(errors=verrs.to_dict())
