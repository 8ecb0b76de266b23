from pydantic import BaseModel, StrictInt
from typing import List, Optional


class CartItemIn(BaseModel):
    productId: Optional[int] = None
    quantity: StrictInt = 1


class CartQuantityIn(BaseModel):
    quantity: Optional[StrictInt] = None


class CartItemOut(BaseModel):
    cart_id: int
    product_id: int
    name: str
    description: Optional[str] = None
    price: float
    category: str
    image_url: Optional[str] = None
    quantity: int
    total_price: float


class CartOut(BaseModel):
    cartItems: List[CartItemOut]
    totalAmount: float
    itemCount: int


class MessageOut(BaseModel):
    message: str
