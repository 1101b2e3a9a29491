from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from typing import Dict, List, Optional

from catalog.core.utils import decode_list

# 1. 공통 속성
class ProductBase(BaseModel):
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None

    price: float = Field(ge=0)
    old_price: Optional[float] = Field(default=None, ge=0)
    discount: Optional[float] = Field(default=0, ge=0, le=100)
    rating: Optional[float] = Field(default=0, ge=0, le=5)
    gender: Optional[str] = None

# 2. 생성 (Create) - 목록 필드는 리스트로 받고 DB에는 "a,b" 로 저장
class ProductCreate(ProductBase):
    model_config = ConfigDict(extra="forbid")

    brand_ids: List[int] = []
    colors: List[str] = []
    occasions: List[str] = []
    category_ids: List[int] = []

# 3. 수정 (Update) - 보낸 필드만 반영 (sparse patch)
class ProductUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    old_price: Optional[float] = Field(default=None, ge=0)
    discount: Optional[float] = Field(default=None, ge=0, le=100)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    gender: Optional[str] = None
    brand_ids: Optional[List[int]] = None
    colors: Optional[List[str]] = None
    occasions: Optional[List[str]] = None
    category_ids: Optional[List[int]] = None

    # NOT NULL 컬럼은 null 로 보낼 수 없음 (보내지 않는 것은 허용)
    @field_validator("name", "price")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value

# 4. 읽기 (Read)
class Product(ProductBase):
    id: int
    brands: Optional[str] = None
    occasion: Optional[str] = None
    colors: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    # 인코딩된 목록 컬럼을 리스트로 풀어서 같이 내려줌
    @computed_field
    @property
    def brand_ids(self) -> List[int]:
        return [int(v) for v in decode_list(self.brands) if v.isdigit()]

    @computed_field
    @property
    def occasions(self) -> List[str]:
        return decode_list(self.occasion)


class ProductPage(BaseModel):
    """목록 조회 결과 + 페이지 정보"""
    model_config = ConfigDict(populate_by_name=True)

    products: List[Product]
    count: int
    last_page: int = Field(alias="lastPage")
    num_of_results_on_cur_page: int = Field(alias="numOfResultsOnCurPage")


class ActionResult(BaseModel):
    message: str = "success"
    id: int


class ProductIds(BaseModel):
    product_ids: List[int]


ProductCategoriesMap = Dict[int, List[str]]
