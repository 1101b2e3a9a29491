# backend/catalog/schemas/filters.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductFilters(BaseModel):
    """
    상품 목록 필터. 모든 항목은 선택사항입니다.
    - 그룹 사이는 AND, 같은 그룹(brandIds, occasions) 안에서는 OR
    - discount: "10-30" (최소-최대, 양끝 포함)
    - sortBy: "price-asc", "created_at-desc", "rating-desc" ...
    """
    model_config = ConfigDict(populate_by_name=True)

    brand_ids: List[int] = Field(default_factory=list, alias="brandIds")
    category_ids: List[int] = Field(default_factory=list, alias="categoryIds")
    gender: Optional[str] = None
    price_range_to: Optional[float] = Field(default=None, alias="priceRangeTo")
    discount: Optional[str] = None
    occasions: List[str] = Field(default_factory=list)
    sort_by: Optional[str] = Field(default=None, alias="sortBy")
