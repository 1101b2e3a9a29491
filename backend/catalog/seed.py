# backend/catalog/seed.py

import asyncio
import logging
from sqlalchemy.future import select

from catalog.core.logging import setup_logging
from catalog.crud import crud_product
from catalog.db.database import AsyncSessionLocal, Base, engine
from catalog.models import Brand, Category, Product
from catalog.schemas.product import ProductCreate

logger = logging.getLogger("catalog.seed")

BRAND_DATA = ["Levi's", "Nike", "Adidas", "Zara", "Uniqlo", "Mango", "H&M"]

CATEGORY_DATA = ["Tops", "Pants", "Outerwear", "Dresses", "Shoes"]

# brand_ids / category_ids 는 위 목록의 순서(1부터)
PRODUCT_DATA = [
    {
        "name": "501 Original Rigid Jeans",
        "description": "Straight fit rigid denim",
        "price": 98.0, "old_price": 120.0, "discount": 18, "rating": 4.6,
        "gender": "men", "brand_ids": [1], "colors": ["indigo"],
        "occasions": ["casual"], "category_ids": [2],
    },
    {
        "name": "Sportswear Club Fleece Joggers",
        "description": "Brushed fleece jogger pants",
        "price": 55.0, "old_price": 65.0, "discount": 15, "rating": 4.4,
        "gender": "unisex", "brand_ids": [2], "colors": ["grey", "black"],
        "occasions": ["casual", "sport"], "category_ids": [2],
    },
    {
        "name": "Track Jacket",
        "description": "Three stripes track jacket",
        "price": 80.0, "old_price": 80.0, "discount": 0, "rating": 4.2,
        "gender": "unisex", "brand_ids": [3], "colors": ["black"],
        "occasions": ["sport"], "category_ids": [1, 3],
    },
    {
        "name": "Satin Slip Dress",
        "description": "Midi satin dress",
        "price": 69.9, "old_price": 99.9, "discount": 30, "rating": 4.1,
        "gender": "women", "brand_ids": [4, 6], "colors": ["champagne"],
        "occasions": ["party", "wedding"], "category_ids": [4],
    },
    {
        "name": "Ultra Light Down Jacket",
        "description": "Packable down jacket",
        "price": 79.9, "old_price": 99.9, "discount": 20, "rating": 4.7,
        "gender": "women", "brand_ids": [5], "colors": ["navy", "beige"],
        "occasions": ["casual", "travel"], "category_ids": [3],
    },
    {
        "name": "Leather Loafers",
        "description": "Classic penny loafers",
        "price": 129.0, "old_price": 129.0, "discount": 0, "rating": 3.9,
        "gender": "men", "brand_ids": [7], "colors": ["brown"],
        "occasions": ["office", "wedding"], "category_ids": [5],
    },
]

async def seed_data():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        # 1. 첫 번째 상품이 이미 있으면 건너뜀
        result = await session.execute(
            select(Product).filter(Product.name == PRODUCT_DATA[0]['name'])
        )
        if result.scalars().first():
            logger.info("데이터가 이미 존재합니다. 시딩을 건너뜁니다.")
            return

        logger.info("브랜드/카테고리 데이터를 시딩합니다...")
        session.add_all([Brand(id=i, name=name) for i, name in enumerate(BRAND_DATA, start=1)])
        session.add_all([Category(id=i, name=name) for i, name in enumerate(CATEGORY_DATA, start=1)])
        await session.commit()

        # 2. 상품 + 카테고리 연결
        for item in PRODUCT_DATA:
            await crud_product.create_product(session, ProductCreate(**item))

        logger.info("%d개 상품 데이터 시딩 완료.", len(PRODUCT_DATA))

async def main():
    setup_logging()
    logger.info("시딩 스크립트 시작...")
    await seed_data()
    logger.info("시딩 스크립트 종료.")

if __name__ == "__main__":
    asyncio.run(main())
