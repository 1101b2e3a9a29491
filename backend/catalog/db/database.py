from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

# MySQL일 때만 charset 옵션 전달
connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("mysql"):
    connect_args = {
        "charset": "utf8mb4",
        "use_unicode": True
    }

engine = create_async_engine(
    SQLALCHEMY_DATABASE_URL,
    echo=settings.sql_echo,
    connect_args=connect_args,
    pool_pre_ping=True
)

AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()

async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
