"""
Request context helpers.

We keep a small context (request_id, upload_field, filename) in ContextVars.
The HTTP middleware and the upload pipeline set these values so every log
line emitted while handling one upload is correlatable.

No external dependencies.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_upload_field: ContextVar[Optional[str]] = ContextVar("upload_field", default=None)
_filename: ContextVar[Optional[str]] = ContextVar("filename", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    upload_field: Optional[str] = None,
    filename: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if upload_field is not None:
        _upload_field.set(upload_field)
    if filename is not None:
        _filename.set(filename)


def clear_context() -> None:
    _request_id.set(None)
    _upload_field.set(None)
    _filename.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    field = _upload_field.get()
    fname = _filename.get()

    if rid:
        ctx["request_id"] = rid
    if field:
        ctx["upload_field"] = field
    if fname:
        ctx["filename"] = fname
    return ctx
