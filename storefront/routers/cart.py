from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.db import get_db
from storefront.schemas.cart import CartItemIn, CartOut, CartQuantityIn, MessageOut
from storefront.services.cart_service import CartService
from storefront.utils.security import get_current_user_id


router = APIRouter()


def get_cart_service(
    db: Session = Depends(get_db), user_id: int = Depends(get_current_user_id)
) -> CartService:
    return CartService(db, user_id)


# Get Cart
@router.get("", response_model=CartOut)
def get_cart(cart: CartService = Depends(get_cart_service)):
    return cart.get_cart()


# Add Cart Item (quantity accumulates for a product already in the cart)
@router.post("", response_model=MessageOut)
def add_cart_item(payload: CartItemIn, cart: CartService = Depends(get_cart_service)):
    cart.add_item(payload.productId, payload.quantity)
    return MessageOut(message="Item added to cart successfully")


# Set Cart Item Quantity
@router.put("/{id}", response_model=MessageOut)
def update_cart_item(id: int, payload: CartQuantityIn, cart: CartService = Depends(get_cart_service)):
    cart.update_quantity(id, payload.quantity)
    return MessageOut(message="Cart item updated successfully")


# Remove Cart Item
@router.delete("/{id}", response_model=MessageOut)
def remove_cart_item(id: int, cart: CartService = Depends(get_cart_service)):
    cart.remove_item(id)
    return MessageOut(message="Cart item removed successfully")
