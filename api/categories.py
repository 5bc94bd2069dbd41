from fastapi import APIRouter, Depends, Request

from api import responses
from api.deps import get_category_service, parse_query
from schemas.category import CategoryCreate, CategoryUpdate
from services.adapters import CategoryAdapter
from services.categories import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
async def list_categories(request: Request, service: CategoryService = Depends(get_category_service)):
    spec = parse_query(request, paginate_default=CategoryAdapter.paginate_by_default)
    return responses.listing(await service.list(spec), "Categories retrieved successfully")


@router.get("/active")
async def list_active_categories(service: CategoryService = Depends(get_category_service)):
    return responses.ok(await service.active(), "Active categories retrieved successfully")


@router.get("/slug/{slug}")
async def get_category_by_slug(slug: str, service: CategoryService = Depends(get_category_service)):
    return responses.ok(await service.find_by_slug(slug), "Category retrieved successfully")


@router.get("/{category_id}")
async def get_category(category_id: str, service: CategoryService = Depends(get_category_service)):
    return responses.ok(await service.find(category_id), "Category retrieved successfully")


@router.post("", status_code=201)
async def create_category(body: CategoryCreate, service: CategoryService = Depends(get_category_service)):
    return responses.created(await service.create(body), "Category created successfully")


@router.put("/{category_id}")
async def update_category(
    category_id: str, body: CategoryUpdate, service: CategoryService = Depends(get_category_service)
):
    return responses.ok(await service.update(category_id, body), "Category updated successfully")


@router.delete("/{category_id}")
async def delete_category(category_id: str, service: CategoryService = Depends(get_category_service)):
    await service.delete(category_id)
    return responses.ok(message="Category deleted successfully")
