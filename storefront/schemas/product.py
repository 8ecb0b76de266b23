from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import List, Optional


class ProductCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    stock: Optional[int] = None


class ProductOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    category: str
    image_url: Optional[str] = None
    stock: int
    created_at: Optional[datetime] = None

    # Pydantic v2 config
    model_config = ConfigDict(from_attributes=True)


class ProductListOut(BaseModel):
    products: List[ProductOut]


class ProductDetailOut(BaseModel):
    product: ProductOut


class ProductCreatedOut(BaseModel):
    message: str
    product: ProductOut
