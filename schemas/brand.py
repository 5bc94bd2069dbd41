from typing import Literal, Optional

from pydantic import BaseModel, Field

from schemas.common import UTCDateTime

Status = Literal["active", "inactive"]


class BrandCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    status: Optional[Status] = None


class BrandUpdate(BaseModel):
    """Partial update: only fields present in the request are applied."""
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    status: Optional[Status] = None


class BrandResponse(BaseModel):
    id: str
    name: str
    slug: str
    status: str
    created_at: Optional[UTCDateTime] = None
    updated_at: Optional[UTCDateTime] = None
    deleted_at: Optional[UTCDateTime] = None

    model_config = {"from_attributes": True}


class BrandSummary(BaseModel):
    """Compact form used by the grouped listing."""
    id: str
    name: str
    slug: str

    model_config = {"from_attributes": True}
