from sqlalchemy import Column, DateTime, Float, Integer, Numeric, String, func
from sqlalchemy.orm import relationship
from catalog.db.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    description = Column(String(1000), nullable=True)
    image_url = Column(String(1000), nullable=True)

    price = Column(Numeric(10, 2, asdecimal=False), index=True, nullable=False)
    old_price = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    discount = Column(Float, nullable=True, default=0)   # 할인율(%)
    rating = Column(Float, nullable=True, default=0)
    gender = Column(String(20), index=True, nullable=True)

    # 브랜드 id 목록: "1,2,3" 또는 "[1, 2, 3]" (FK 아님)
    brands = Column(String(255), nullable=True)
    # 상황 태그: "party,wedding"
    occasion = Column(String(255), nullable=True)
    colors = Column(String(255), nullable=True)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    # 관계 설정
    categories = relationship("ProductCategory", back_populates="product")
