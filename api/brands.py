from fastapi import APIRouter, Depends, Request

from api import responses
from api.deps import get_brand_service, parse_query
from schemas.brand import BrandCreate, BrandUpdate
from services.adapters import BrandAdapter
from services.brands import BrandService

router = APIRouter(prefix="/api/brands", tags=["brands"])


@router.get("")
async def list_brands(request: Request, service: BrandService = Depends(get_brand_service)):
    spec = parse_query(request, paginate_default=BrandAdapter.paginate_by_default)
    return responses.listing(await service.list(spec), "Brands retrieved successfully")


@router.get("/active")
async def list_active_brands(service: BrandService = Depends(get_brand_service)):
    return responses.ok(await service.active(), "Active brands retrieved successfully")


@router.get("/grouped")
async def list_grouped_brands(service: BrandService = Depends(get_brand_service)):
    return responses.ok(await service.grouped(), "Grouped brands retrieved successfully")


@router.get("/{brand_id}")
async def get_brand(brand_id: str, service: BrandService = Depends(get_brand_service)):
    return responses.ok(await service.find(brand_id), "Brand retrieved successfully")


@router.post("", status_code=201)
async def create_brand(body: BrandCreate, service: BrandService = Depends(get_brand_service)):
    return responses.created(await service.create(body), "Brand created successfully")


@router.put("/{brand_id}")
async def update_brand(brand_id: str, body: BrandUpdate, service: BrandService = Depends(get_brand_service)):
    return responses.ok(await service.update(brand_id, body), "Brand updated successfully")


@router.delete("/{brand_id}")
async def delete_brand(brand_id: str, service: BrandService = Depends(get_brand_service)):
    await service.delete(brand_id)
    return responses.ok(message="Brand deleted successfully")
