# backend/catalog/core/config.py

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """환경변수(.env)에서 읽어오는 설정"""

    app_name: str = "Product Catalog Service"

    # DB
    database_url: str = "mysql+aiomysql://root:12345@db:3306/catalog_db?charset=utf8mb4"
    sql_echo: bool = False

    # 페이지네이션
    default_page_size: int = 10
    max_page_size: int = 100

    # 잘못된 discount / sortBy 값 처리 방식
    # False: 조용히 무시, True: InvalidFilterError(422)
    strict_filters: bool = False

    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
