from schemas.brand import BrandCreate, BrandResponse, BrandSummary, BrandUpdate
from schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from schemas.common import Paginated, PaginationMeta, UTCDateTime
from schemas.media import MediaCreate, MediaResponse, MediaUpdate, MediaUploadURL
from schemas.query import QuerySpec, SortDirection

__all__ = [
    "BrandCreate",
    "BrandResponse",
    "BrandSummary",
    "BrandUpdate",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "MediaCreate",
    "MediaResponse",
    "MediaUpdate",
    "MediaUploadURL",
    "Paginated",
    "PaginationMeta",
    "UTCDateTime",
    "QuerySpec",
    "SortDirection",
]
