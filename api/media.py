from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from api import responses
from api.deps import get_media_service, parse_query
from schemas.media import MediaCreate, MediaUpdate, MediaUploadURL
from services.adapters import MediaAdapter
from services.media import MediaService

router = APIRouter(prefix="/api/media", tags=["media"])


@router.get("")
async def list_media(request: Request, service: MediaService = Depends(get_media_service)):
    spec = parse_query(request, paginate_default=MediaAdapter.paginate_by_default)
    return responses.listing(await service.list(spec), "Media retrieved successfully")


@router.get("/{media_id}")
async def get_media(media_id: str, service: MediaService = Depends(get_media_service)):
    return responses.ok(await service.find(media_id), "Media retrieved successfully")


@router.post("", status_code=201)
async def create_media(body: MediaCreate, service: MediaService = Depends(get_media_service)):
    return responses.created(await service.create(body), "Media created successfully")


@router.post("/upload", status_code=201)
async def upload_media(
    file: UploadFile = File(..., description="File to store"),
    service: MediaService = Depends(get_media_service),
):
    if not file.filename:
        raise HTTPException(status_code=400, detail="Please upload a file.")
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="File is empty.")
    return responses.created(await service.upload(content, file.filename), "File uploaded successfully")


@router.post("/upload-url", status_code=201)
async def upload_media_from_url(body: MediaUploadURL, service: MediaService = Depends(get_media_service)):
    media = await service.upload_from_url(str(body.url), body.file_name)
    return responses.created(media, "File uploaded successfully")


@router.put("/{media_id}")
async def update_media(media_id: str, body: MediaUpdate, service: MediaService = Depends(get_media_service)):
    return responses.ok(await service.update(media_id, body), "Media updated successfully")


@router.delete("/{media_id}")
async def delete_media(media_id: str, service: MediaService = Depends(get_media_service)):
    await service.delete(media_id)
    return responses.ok(message="Media deleted successfully")
