# backend/catalog/api/v1/api.py

from fastapi import APIRouter
from catalog.api.v1.endpoints import brands, products

api_router = APIRouter()

# 1. products 라우터 포함
api_router.include_router(products.router, prefix="/products", tags=["products"])

# 2. brands 라우터 포함
api_router.include_router(brands.router, prefix="/brands", tags=["brands"])
