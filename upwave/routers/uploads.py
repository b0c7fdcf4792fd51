"""
uploads.py
- Purpose: API route for multipart file uploads.
- Design: Keep router thin. The pipeline decides; the router maps the outcome to a status code.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from upwave.api.deps import get_uploader
from upwave.schemas.upload import UploadResponse
from upwave.services.uploader import Uploader, upload

router = APIRouter(prefix="/api/uploads", tags=["Uploads"])


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def create_upload(request: Request, uploader: Uploader = Depends(get_uploader)):
    verrs = await upload(request, uploader)
    body = UploadResponse.from_errors(verrs)
    if verrs.has_any():
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body.model_dump())
    return body
