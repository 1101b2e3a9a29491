from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from catalog.db.database import Base

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)


class ProductCategory(Base):
    """상품 <-> 카테고리 연결 테이블 (N:M)"""
    __tablename__ = "product_categories"

    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    category_id = Column(Integer, ForeignKey("categories.id"), primary_key=True)

    product = relationship("Product", back_populates="categories")
    category = relationship("Category")
