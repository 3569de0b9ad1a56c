from fastapi import APIRouter, Depends, Query
from typing import Optional
from framework.exceptions.handler import BusinessException
from framework.response import ResponseModel
from ..models import ProductCreate, ProductUpdate, SearchFilters, to_wire
from ..repositories.base import IProductRepository
from ..repositories.manager import RepositoryManager
from ..service import ProductService

router = APIRouter()

def get_product_repository() -> IProductRepository:
    """Dependency: repository bound at startup."""
    return RepositoryManager.get_instance().products

def get_product_service(
    repository: IProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Dependency: create ProductService."""
    return ProductService(repository)

def product_not_found(product_id: int) -> BusinessException:
    return BusinessException(
        "Product not found",
        status_code=404,
        code=404,
        detail={"id": product_id}
    )

@router.get("")
async def list_products(
    category: Optional[str] = None,
    in_stock: Optional[bool] = Query(default=None, alias="inStock"),
    service: ProductService = Depends(get_product_service)
):
    """List products; `category` and `inStock` narrow the list."""
    if category is None and in_stock is None:
        products = await service.get_products()
    elif in_stock is None:
        products = await service.get_products_by_category(category)
    elif category is None and in_stock:
        products = await service.get_products_in_stock()
    else:
        products = await service.search_products(
            "", SearchFilters(category=category, in_stock=in_stock)
        )
    return ResponseModel.success(data=[to_wire(p) for p in products])

@router.get("/search")
async def search_products(
    q: str = "",
    category: Optional[str] = None,
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, alias="maxPrice"),
    in_stock: Optional[bool] = Query(default=None, alias="inStock"),
    service: ProductService = Depends(get_product_service)
):
    """Text search over name and description with optional filters."""
    filters = SearchFilters(
        category=category,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock
    )
    products = await service.search_products(q, filters)
    return ResponseModel.success(data=[to_wire(p) for p in products])

@router.get("/expensive")
async def expensive_products(
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    service: ProductService = Depends(get_product_service)
):
    """Products at or above a price threshold (default 100)."""
    if min_price is None:
        products = await service.get_expensive_products()
    else:
        products = await service.get_expensive_products(min_price)
    return ResponseModel.success(data=[to_wire(p) for p in products])

@router.get("/{product_id}")
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    product = await service.get_product_by_id(product_id)
    if product is None:
        raise product_not_found(product_id)
    return ResponseModel.success(data=to_wire(product))

@router.post("")
async def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    product = await service.create_product(payload)
    return ResponseModel.success(data=to_wire(product))

@router.put("/{product_id}")
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """Partial update; only fields present in the body are changed."""
    product = await service.update_product(product_id, payload)
    if product is None:
        raise product_not_found(product_id)
    return ResponseModel.success(data=to_wire(product))

@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    deleted = await service.delete_product(product_id)
    if not deleted:
        raise product_not_found(product_id)
    return ResponseModel.success(data={"id": product_id, "deleted": True})
