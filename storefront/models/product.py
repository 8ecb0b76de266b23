from sqlalchemy import Column, Integer, String, Numeric, DateTime
from datetime import datetime

from storefront.db import Base


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(1000), default="")
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    image_url = Column(String(500), default="")
    stock = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
