import os

# catalog.db.database 가 import 시점에 엔진을 만들기 때문에 먼저 설정
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.core import revalidation
from catalog.db.database import Base
from catalog.models import Brand, Category, Product, ProductCategory

BRANDS = ["Levi's", "Nike", "Adidas", "Puma", "Zara", "Uniqlo", "Mango", "H&M", "Gap"]
CATEGORIES = ["Tops", "Pants", "Outerwear"]


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(engine):
    """브랜드 1~9, 카테고리 1~3 이 들어있는 세션"""
    Session = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        session.add_all([Brand(id=i, name=name) for i, name in enumerate(BRANDS, start=1)])
        session.add_all([Category(id=i, name=name) for i, name in enumerate(CATEGORIES, start=1)])
        await session.commit()
        yield session


@pytest.fixture
def add_product(db):
    async def _add(category_ids=(), **fields):
        fields.setdefault("name", "product")
        fields.setdefault("price", 10)
        product = Product(**fields)
        db.add(product)
        await db.flush()
        for category_id in category_ids:
            db.add(ProductCategory(product_id=product.id, category_id=category_id))
        await db.commit()
        return product
    return _add


@pytest.fixture(autouse=True)
def _clear_revalidation_listeners():
    revalidation.clear_listeners()
    yield
    revalidation.clear_listeners()
