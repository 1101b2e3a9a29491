# backend/catalog/api/v1/endpoints/brands.py

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, List, Optional

from catalog.db.database import get_db
from catalog.crud import crud_product

router = APIRouter()

# 브랜드 id -> 이름
@router.get("/names", response_model=Dict[int, Optional[str]])
async def map_brand_names(ids: List[int] = Query([]), db: AsyncSession = Depends(get_db)):
    return await crud_product.map_brand_ids_to_names(db, ids)
