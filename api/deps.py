from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from database import get_db
from schemas.query import QuerySpec
from services.brands import BrandService
from services.categories import CategoryService
from services.media import MediaService
from services.storage import ImageKitClient


@lru_cache
def get_storage() -> ImageKitClient:
    return ImageKitClient.from_settings(settings)


def get_brand_service(db: AsyncSession = Depends(get_db)) -> BrandService:
    return BrandService(db)


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_media_service(
    db: AsyncSession = Depends(get_db),
    storage: ImageKitClient = Depends(get_storage),
) -> MediaService:
    return MediaService(db, storage)


def parse_query(request: Request, paginate_default: bool = False) -> QuerySpec:
    return QuerySpec.from_params(
        request.query_params,
        paginate_default=paginate_default,
        per_page_default=settings.default_per_page,
    )
