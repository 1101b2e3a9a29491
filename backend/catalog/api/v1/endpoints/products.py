# backend/catalog/api/v1/endpoints/products.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from catalog.core.config import settings
from catalog.db.database import get_db
from catalog.schemas.category import Category
from catalog.schemas.filters import ProductFilters
from catalog.schemas.product import (
    ActionResult,
    Product,
    ProductCategoriesMap,
    ProductCreate,
    ProductIds,
    ProductPage,
    ProductUpdate,
)
from catalog.crud import crud_product

router = APIRouter()


# 1. 상품 목록 (필터 + 페이지네이션)
@router.get("", response_model=ProductPage)
async def list_products(
    page_no: int = Query(1, ge=1, alias="pageNo"),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size, alias="pageSize"),
    brand_ids: List[int] = Query([], alias="brandIds"),
    category_ids: List[int] = Query([], alias="categoryIds"),
    gender: Optional[str] = None,
    price_range_to: Optional[float] = Query(None, alias="priceRangeTo"),
    discount: Optional[str] = None,
    occasions: List[str] = Query([]),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    db: AsyncSession = Depends(get_db),
):
    filters = ProductFilters(
        brand_ids=brand_ids,
        category_ids=category_ids,
        gender=gender,
        price_range_to=price_range_to,
        discount=discount,
        occasions=occasions,
        sort_by=sort_by,
    )
    return await crud_product.get_products(db, page_no=page_no, page_size=page_size, filters=filters)


# 2. 여러 상품의 카테고리 이름
@router.post("/categories", response_model=ProductCategoriesMap)
async def map_product_categories(body: ProductIds, db: AsyncSession = Depends(get_db)):
    return await crud_product.get_all_product_categories(db, body.product_ids)


# 3. 상품 상세
@router.get("/{product_id}", response_model=Product)
async def read_product(product_id: int, db: AsyncSession = Depends(get_db)):
    return await crud_product.get_product(db, product_id)


# 4. 상품 카테고리 목록
@router.get("/{product_id}/categories", response_model=List[Category])
async def read_product_categories(product_id: int, db: AsyncSession = Depends(get_db)):
    await crud_product.get_product(db, product_id)
    return await crud_product.get_product_categories(db, product_id)


# 5. 상품 생성
@router.post("", response_model=ActionResult, status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductCreate, db: AsyncSession = Depends(get_db)):
    db_product = await crud_product.create_product(db, product)
    return ActionResult(id=db_product.id)


# 6. 상품 수정
@router.patch("/{product_id}", response_model=ActionResult)
async def update_product(product_id: int, patch: ProductUpdate, db: AsyncSession = Depends(get_db)):
    db_product = await crud_product.update_product(db, product_id, patch)
    return ActionResult(id=db_product.id)


# 7. 상품 삭제
@router.delete("/{product_id}", response_model=ActionResult)
async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    deleted_id = await crud_product.delete_product(db, product_id)
    return ActionResult(id=deleted_id)
