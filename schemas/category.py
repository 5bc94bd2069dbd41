from typing import Optional

from pydantic import BaseModel, Field

from schemas.brand import Status
from schemas.common import UTCDateTime

ULID_PATTERN = r"^[0-9A-HJKMNP-TV-Z]{26}$"


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    description: Optional[str] = None
    status: Optional[Status] = None
    media_id: Optional[str] = Field(None, pattern=ULID_PATTERN)


class CategoryUpdate(BaseModel):
    """Partial update: only fields present in the request are applied."""
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    description: Optional[str] = None
    status: Optional[Status] = None
    media_id: Optional[str] = Field(None, pattern=ULID_PATTERN)


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    status: str
    media_id: Optional[str] = None
    created_at: Optional[UTCDateTime] = None
    updated_at: Optional[UTCDateTime] = None
    deleted_at: Optional[UTCDateTime] = None

    model_config = {"from_attributes": True}
