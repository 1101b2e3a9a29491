# backend/catalog/models/review.py

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from catalog.db.database import Base

# 상품 삭제 시 같이 지워지는 테이블들

class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), index=True, nullable=False)
    rating = Column(Integer, nullable=False)
    content = Column(String(1000), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), index=True, nullable=False)
    content = Column(String(1000), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
