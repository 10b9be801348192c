from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from imagestore.api.dependencies import provide_image_store
from imagestore.api.v1.schemas.image import ImageDeleteResponse, ImageSaveRequest, ImageSaveResponse
from imagestore.application.images import ImageStoreService
from imagestore.domain.models import FailureKind
from imagestore.domain.sources import classify_image_data

router = APIRouter(prefix="/v1", tags=["images"])


# Sync handlers: the remote fetch blocks, so FastAPI runs these in its threadpool.
@router.post("/images", response_model=ImageSaveResponse)
def save_image(body: ImageSaveRequest, service: ImageStoreService = Depends(provide_image_store)):
    try:
        result = service.save(classify_image_data(body.imageData), body.fileName)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if not result.ok:
        status_code = 500 if result.failure is FailureKind.IO else 422
        raise HTTPException(status_code=status_code, detail=result.reason or "Image could not be saved")
    return ImageSaveResponse(path=result.path)


@router.delete("/images", response_model=ImageDeleteResponse)
def delete_images(service: ImageStoreService = Depends(provide_image_store)):
    return ImageDeleteResponse(deleted=service.delete_images())
