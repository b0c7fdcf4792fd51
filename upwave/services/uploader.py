"""
uploader.py
- Purpose: The upload pipeline: pull one file out of a multipart request,
  resolve its size, validate it, and hand it to a storage Uploader.
- Owns: ordering of validation vs. storage, size inference, the split between
  validation failures (returned) and operational failures (raised).
- Design: Storage agnostic. Anything implementing the Uploader protocol
  (S3 bucket, filesystem, test double) can receive uploads.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO, Protocol

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile

from upwave.core import AppError, ErrorCode, ErrorReason
from upwave.core.errors import bad_request, storage_error
from upwave.core.request_context import set_context
from upwave.validations.types import FileHeader, ValidationErrors, parse_int

logger = logging.getLogger("upwave.uploader")


class Uploader(Protocol):
    """What a storage backend implements to receive validated uploads."""

    def field_name(self) -> str: ...

    def path(self, header: FileHeader) -> str: ...

    def validate(self, header: FileHeader) -> ValidationErrors: ...

    def put(self, path: str, stream: BinaryIO, size: int, content_type: str) -> None: ...


def resolve_size(stream: BinaryIO) -> int:
    """
    Size of a stream without a declared length: seek to the end, then rewind.

    Non-seekable streams are rejected rather than buffered.
    """
    try:
        if not stream.seekable():
            raise io.UnsupportedOperation("stream is not seekable")
        size = stream.seek(0, io.SEEK_END)
        stream.seek(0, io.SEEK_SET)
    except (OSError, ValueError) as e:
        raise AppError(
            code=ErrorCode.FILE_SIZE_UNKNOWN,
            reason=ErrorReason.UNSEEKABLE_STREAM.value,
            message=f"Could not determine upload size: {e}",
        ) from e
    return size


async def _parse_form(request: Request) -> FormData:
    content_type = request.headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/form-data"):
        raise bad_request(
            ErrorReason.NOT_MULTIPART,
            code=ErrorCode.FORM_PARSE_FAILED,
            details={"content_type": content_type},
        )

    try:
        return await request.form()
    except Exception as e:
        raise bad_request(ErrorReason.MALFORMED_FORM, code=ErrorCode.FORM_PARSE_FAILED) from e


def _attached_file(form: FormData, field_name: str) -> UploadFile | None:
    value = form.get(field_name)
    # A plain text field under the same name is not an attachment
    if not isinstance(value, UploadFile):
        return None
    # Browsers send an empty file input as a part with filename=""
    if not value.filename:
        return None
    return value


async def upload(request: Request, uploader: Uploader) -> ValidationErrors:
    """
    Run one upload attempt.

    Returns the validation errors (empty when the file was stored, or when no
    file was attached at all). Raises AppError for operational failures.
    `uploader.put` is called at most once, and only for valid input.
    """
    field_name = uploader.field_name()
    set_context(upload_field=field_name)

    form = await _parse_form(request)
    try:
        return await _store(form, field_name, uploader)
    finally:
        await form.close()


async def _store(form: FormData, field_name: str, uploader: Uploader) -> ValidationErrors:
    file = _attached_file(form, field_name)
    if file is None:
        logger.info("upload.no_file", extra={"field": field_name})
        return ValidationErrors()

    header = FileHeader.from_upload(file)
    set_context(filename=header.filename)

    if header.content_length == "":
        size = resolve_size(file.file)
        header.headers["content-length"] = str(size)
    else:
        try:
            size = parse_int(header.content_length)
        except ValueError as e:
            raise bad_request(
                ErrorReason.INVALID_CONTENT_LENGTH,
                code=ErrorCode.INVALID_CONTENT_LENGTH,
                details={"content_length": header.content_length},
            ) from e

    verrs = uploader.validate(header)
    if verrs.has_any():
        logger.info("upload.invalid", extra={"field": field_name, "errors": verrs.to_dict()})
        return verrs

    path = uploader.path(header)
    try:
        await run_in_threadpool(uploader.put, path, file.file, size, header.content_type)
    except AppError:
        raise
    except Exception as e:
        raise storage_error(message=f"Failed to store upload at {path}: {e}") from e

    logger.info(
        "upload.stored",
        extra={"field": field_name, "path": path, "size": size, "content_type": header.content_type},
    )
    return verrs
