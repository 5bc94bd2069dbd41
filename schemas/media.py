from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, Field

from schemas.common import UTCDateTime


class MediaCreate(BaseModel):
    file_id: str = Field(..., min_length=1)
    file_name: str = Field(..., min_length=1)
    url: AnyHttpUrl
    thumb_url: Optional[AnyHttpUrl] = None
    file_type: str = Field(..., min_length=1)
    size: int = Field(..., gt=0)
    description: Optional[str] = None


class MediaUpdate(BaseModel):
    """Partial update: only fields present in the request are applied."""
    file_id: Optional[str] = Field(None, min_length=1)
    file_name: Optional[str] = Field(None, min_length=1)
    url: Optional[AnyHttpUrl] = None
    thumb_url: Optional[AnyHttpUrl] = None
    file_type: Optional[str] = Field(None, min_length=1)
    size: Optional[int] = Field(None, gt=0)
    description: Optional[str] = None


class MediaUploadURL(BaseModel):
    url: AnyHttpUrl
    file_name: Optional[str] = None


class MediaResponse(BaseModel):
    id: str
    file_id: str
    file_name: str
    url: str
    thumb_url: Optional[str] = None
    file_type: Optional[str] = None
    size: int
    description: Optional[str] = None
    created_at: Optional[UTCDateTime] = None
    updated_at: Optional[UTCDateTime] = None
    deleted_at: Optional[UTCDateTime] = None

    model_config = {"from_attributes": True}
