# backend/catalog/crud/crud_product.py

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from catalog.core.config import settings
from catalog.core.exceptions import CatalogWriteError, ProductNotFoundError
from catalog.core.revalidation import PRODUCTS_PATH, revalidate_path
from catalog.core.utils import encode_list, last_page
from catalog.crud.product_query import build_product_queries
from catalog.models.brand import Brand
from catalog.models.category import Category, ProductCategory
from catalog.models.product import Product
from catalog.models.review import Comment, Review
from catalog.schemas.filters import ProductFilters
from catalog.schemas.product import Product as ProductSchema
from catalog.schemas.product import ProductCreate, ProductPage, ProductUpdate

logger = logging.getLogger(__name__)

# 리스트로 받는 필드 -> DB 컬럼 이름
LIST_FIELDS = {
    "brand_ids": "brands",
    "colors": "colors",
    "occasions": "occasion",
}


# 1. 상품 목록 조회 (필터 + 페이지네이션)
async def get_products(
    db: AsyncSession,
    page_no: int = 1,
    page_size: Optional[int] = None,
    filters: Optional[ProductFilters] = None,
    strict: Optional[bool] = None,
) -> ProductPage:
    if page_size is None:
        page_size = settings.default_page_size
    filters = filters or ProductFilters()
    strict = settings.strict_filters if strict is None else strict

    logger.debug("product filters: %s", filters.model_dump(exclude_defaults=True))
    count_stmt, page_stmt = build_product_queries(filters, page_no, page_size, strict)

    total_count = (await db.execute(count_stmt)).scalar_one() or 0
    products = (await db.execute(page_stmt)).scalars().all()

    return ProductPage(
        products=[ProductSchema.model_validate(p) for p in products],
        count=total_count,
        last_page=last_page(total_count, page_size),
        num_of_results_on_cur_page=len(products),
    )


# 2. 상품 조회
async def get_product(db: AsyncSession, product_id: int) -> Product:
    result = await db.execute(select(Product).filter(Product.id == product_id))
    product = result.scalars().first()
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


def _replace_categories(db: AsyncSession, product_id: int, category_ids: Iterable[int]):
    # 중복 id 제거 (순서 유지)
    for category_id in dict.fromkeys(category_ids):
        db.add(ProductCategory(product_id=product_id, category_id=category_id))


def _column_values(data: dict) -> dict:
    values = {}
    for field, value in data.items():
        if field == "category_ids":
            continue
        if field in LIST_FIELDS:
            values[LIST_FIELDS[field]] = encode_list(value)
        else:
            values[field] = value
    return values


# 3. 상품 생성 (상품 + 카테고리 연결을 하나의 트랜잭션으로)
async def create_product(db: AsyncSession, product: ProductCreate) -> Product:
    db_product = Product(**_column_values(product.model_dump()))
    try:
        db.add(db_product)
        await db.flush()
        _replace_categories(db, db_product.id, product.category_ids)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("create product failed")
        raise CatalogWriteError("Something went wrong, Cannot create the product") from e

    await db.refresh(db_product)
    logger.info("product created: id=%s", db_product.id)
    revalidate_path(PRODUCTS_PATH)
    return db_product


# 4. 상품 수정 (보낸 필드만 반영, 카테고리는 전체 교체)
async def update_product(db: AsyncSession, product_id: int, patch: ProductUpdate) -> Product:
    db_product = await get_product(db, product_id)
    data = patch.model_dump(exclude_unset=True)

    try:
        for column, value in _column_values(data).items():
            setattr(db_product, column, value)

        if "category_ids" in data:
            await db.execute(
                delete(ProductCategory).where(ProductCategory.product_id == product_id)
            )
            _replace_categories(db, product_id, data["category_ids"] or [])

        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("update product failed: id=%s", product_id)
        raise CatalogWriteError("Something went wrong, Cannot update the product") from e

    await db.refresh(db_product)
    logger.info("product updated: id=%s fields=%s", product_id, sorted(data))
    revalidate_path(PRODUCTS_PATH)
    return db_product


# 5. 상품 삭제 (카테고리 연결, 리뷰, 댓글 -> 상품 순서로 삭제, 실패하면 전부 롤백)
async def delete_product(db: AsyncSession, product_id: int) -> int:
    await get_product(db, product_id)

    try:
        await db.execute(delete(ProductCategory).where(ProductCategory.product_id == product_id))
        await db.execute(delete(Review).where(Review.product_id == product_id))
        await db.execute(delete(Comment).where(Comment.product_id == product_id))
        await db.execute(delete(Product).where(Product.id == product_id))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("delete product failed: id=%s", product_id)
        raise CatalogWriteError("Something went wrong, Cannot delete the product") from e

    logger.info("product deleted: id=%s", product_id)
    revalidate_path(PRODUCTS_PATH)
    return product_id


# 6. 브랜드 id -> 이름 (입력 순서 유지, 없는 id는 None)
async def map_brand_ids_to_names(db: AsyncSession, brand_ids: List) -> Dict[int, Optional[str]]:
    ids = [int(brand_id) for brand_id in brand_ids]
    if not ids:
        return {}
    result = await db.execute(select(Brand.id, Brand.name).filter(Brand.id.in_(ids)))
    names = {row.id: row.name for row in result.all()}
    return {brand_id: names.get(brand_id) for brand_id in ids}


# 7. 상품 목록 -> {상품 id: [카테고리 이름]}
async def get_all_product_categories(db: AsyncSession, products: List) -> Dict[int, List[str]]:
    product_ids = [p if isinstance(p, int) else p.id for p in products]
    categories_map = {product_id: [] for product_id in product_ids}
    if not product_ids:
        return categories_map

    result = await db.execute(
        select(ProductCategory.product_id, Category.name)
        .join(Category, Category.id == ProductCategory.category_id)
        .filter(ProductCategory.product_id.in_(product_ids))
        .order_by(ProductCategory.product_id, Category.id)
    )
    for product_id, name in result.all():
        categories_map[product_id].append(name)
    return categories_map


# 8. 상품 하나의 카테고리 목록
async def get_product_categories(db: AsyncSession, product_id: int) -> List[Category]:
    result = await db.execute(
        select(Category)
        .join(ProductCategory, Category.id == ProductCategory.category_id)
        .filter(ProductCategory.product_id == product_id)
        .order_by(Category.id)
    )
    return result.scalars().all()
