# backend/catalog/crud/product_query.py
"""
상품 목록 필터 -> SQL 변환

같은 조건(where/join)으로 두 개의 쿼리를 만듭니다.
  1) COUNT(DISTINCT products.id)  -> 전체 개수 / 마지막 페이지 계산
  2) SELECT DISTINCT products.*    -> 현재 페이지 상품
카테고리 필터는 product_categories 와 JOIN 하므로 한 상품이 여러 번 나올 수 있어
두 쿼리 모두 DISTINCT 로 중복을 제거합니다.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import String, distinct, func, literal, or_, select
from sqlalchemy.sql import ColumnElement, Select

from catalog.core.exceptions import InvalidFilterError
from catalog.models.category import ProductCategory
from catalog.models.product import Product
from catalog.schemas.filters import ProductFilters

logger = logging.getLogger(__name__)

# 정렬 허용 컬럼 (SQL 인젝션 방지용 화이트리스트)
SORTABLE_COLUMNS = {
    "price": Product.price,
    "created_at": Product.created_at,
    "rating": Product.rating,
}
SORT_DIRECTIONS = ("asc", "desc")


def _reject_or_ignore(message: str, strict: bool) -> None:
    if strict:
        raise InvalidFilterError(message)
    logger.warning("%s - filter ignored", message)


def parse_discount_range(raw: Optional[str], strict: bool = False) -> Optional[Tuple[float, float]]:
    """"10-30" -> (10.0, 30.0). 형식이 잘못되면 None (strict 모드면 예외)"""
    if not raw:
        return None

    # 양쪽 숫자가 모두 있어야 함: "-10", "10-" 처럼 한쪽이 비었거나
    # "10-20-30" 처럼 구간이 셋 이상이면 잘못된 형식으로 본다
    min_str, sep, max_str = raw.partition("-")
    try:
        if not sep:
            raise ValueError(raw)
        low, high = float(min_str), float(max_str)
    except ValueError:
        _reject_or_ignore(f"Malformed discount range: {raw!r}", strict)
        return None

    if not (math.isfinite(low) and math.isfinite(high)):
        _reject_or_ignore(f"Malformed discount range: {raw!r}", strict)
        return None
    return low, high


def parse_sort(raw: Optional[str], strict: bool = False) -> Optional[Tuple[str, str]]:
    """"price-asc" -> ("price", "asc"). 허용되지 않은 컬럼/방향이면 None"""
    if not raw:
        return None

    column, sep, direction = raw.partition("-")
    direction = direction.lower()
    if not sep or column not in SORTABLE_COLUMNS or direction not in SORT_DIRECTIONS:
        _reject_or_ignore(f"Unsupported sort option: {raw!r}", strict)
        return None
    return column, direction


def _normalized_list(column) -> ColumnElement:
    # '["1", "2"]' / "1, 2" / "1,2" -> ",1,2,"
    expr = func.coalesce(column, "", type_=String)
    for old, new in (("[", ""), ("]", ""), ('"', ""), (", ", ",")):
        expr = func.replace(expr, old, new, type_=String)
    return literal(",", type_=String) + expr + literal(",", type_=String)


def list_membership(column, values: Iterable) -> ColumnElement:
    """인코딩된 목록 컬럼에 values 중 하나라도 들어있으면 참 (OR)

    값은 바인드 파라미터로만 전달되고 LIKE 와일드카드는 이스케이프됩니다.
    """
    normalized = _normalized_list(column)
    return or_(*[
        normalized.contains(f",{value},", autoescape=True)
        for value in values
    ])


def _non_blank(values: Iterable) -> List[str]:
    # 공백뿐인 값은 버림
    return [str(v).strip() for v in values if str(v).strip()]


def build_filter_clauses(filters: ProductFilters, strict: bool = False) -> List[ColumnElement]:
    clauses = []

    brand_ids = _non_blank(filters.brand_ids)
    if brand_ids:
        clauses.append(list_membership(Product.brands, brand_ids))

    if filters.category_ids:
        clauses.append(ProductCategory.category_id.in_(filters.category_ids))

    if filters.gender:
        clauses.append(Product.gender == filters.gender)

    if filters.price_range_to is not None:
        clauses.append(Product.price <= filters.price_range_to)

    discount_range = parse_discount_range(filters.discount, strict)
    if discount_range:
        low, high = discount_range
        clauses.append(Product.discount >= low)
        clauses.append(Product.discount <= high)

    occasions = _non_blank(filters.occasions)
    if occasions:
        clauses.append(list_membership(Product.occasion, occasions))

    return clauses


def build_order_by(sort_by: Optional[str], strict: bool = False) -> Optional[ColumnElement]:
    parsed = parse_sort(sort_by, strict)
    if parsed is None:
        return None
    column, direction = parsed
    return SORTABLE_COLUMNS[column].asc() if direction == "asc" else SORTABLE_COLUMNS[column].desc()


def _apply_filters(stmt: Select, filters: ProductFilters, clauses: List[ColumnElement]) -> Select:
    if filters.category_ids:
        stmt = stmt.join(ProductCategory, Product.id == ProductCategory.product_id)
    if clauses:
        stmt = stmt.where(*clauses)
    return stmt


def build_product_queries(
    filters: ProductFilters,
    page_no: int,
    page_size: int,
    strict: bool = False,
) -> Tuple[Select, Select]:
    """(count 쿼리, 페이지 쿼리) 반환. 두 쿼리는 같은 조건을 공유합니다."""
    if page_no < 1 or page_size < 1:
        raise InvalidFilterError(f"pageNo and pageSize must be positive (got {page_no}, {page_size})")

    clauses = build_filter_clauses(filters, strict)
    order_by = build_order_by(filters.sort_by, strict)

    count_stmt = _apply_filters(
        select(func.count(distinct(Product.id))).select_from(Product), filters, clauses
    )

    page_stmt = _apply_filters(select(Product).distinct(), filters, clauses)
    if order_by is not None:
        page_stmt = page_stmt.order_by(order_by)
    page_stmt = page_stmt.offset((page_no - 1) * page_size).limit(page_size)

    return count_stmt, page_stmt
