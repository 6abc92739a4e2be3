"""Media upload routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from starlette.datastructures import UploadFile

from board.application.usecase.upload import (
    UploadMediaRequest,
    UploadMediaResponse,
    UploadMediaUseCase,
)
from board.domain.error import ValidationError
from board.domain.service import MediaStorageError
from board.util.error import ConfigurationError

router = APIRouter(prefix="/api", tags=["upload"], route_class=DishkaRoute)

UPLOAD_FAILED = "Upload failed. Please try again."


@router.post("/upload", response_model=UploadMediaResponse)
async def upload(
    request: Request,
    upload_media_use_case: FromDishka[UploadMediaUseCase],
) -> UploadMediaResponse:
    """Store an image for a thread and return its public URL.

    Expects multipart form data with the file under ``file``. No session is
    required.
    """
    try:
        upload_media_use_case.require_configured()
    except ConfigurationError as e:
        logfire.error("Object storage is not configured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )

    try:
        form = await request.form()
        file = form.get("file")
        if not isinstance(file, UploadFile):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing file in form data under key 'file'.",
            )

        data = await file.read()
        return await upload_media_use_case.execute(
            UploadMediaRequest(
                data=data, filename=file.filename, content_type=file.content_type
            )
        )
    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MediaStorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UPLOAD_FAILED
        )
    except Exception:
        logfire.exception("Unexpected upload error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UPLOAD_FAILED
        )
