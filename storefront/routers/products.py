from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import Optional

from storefront.db import get_db
from storefront.errors import InvalidArgument, NotFound
from storefront.models.product import Product
from storefront.schemas.product import (
    ProductCreate,
    ProductCreatedOut,
    ProductDetailOut,
    ProductListOut,
    ProductOut,
)

router = APIRouter()

SORT_ORDERS = {
    "newest": (Product.created_at.desc(), Product.id.desc()),
    "price_asc": (Product.price.asc(), Product.id.asc()),
    "price_desc": (Product.price.desc(), Product.id.asc()),
    "name": (Product.name.asc(), Product.id.asc()),
}


# Get All Products (with filters)
@router.get("", response_model=ProductListOut)
def get_all_products(
    category: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    search: Optional[str] = None,
    sort: str = "newest",
    db: Session = Depends(get_db),
):
    """List products; every given filter must match."""
    order_by = SORT_ORDERS.get(sort)
    if order_by is None:
        raise InvalidArgument(f"Unknown sort '{sort}'. Use one of: {', '.join(SORT_ORDERS)}")

    query = db.query(Product)
    if category and category != "all":
        query = query.filter(Product.category == category)
    if min_price is not None:
        query = query.filter(Product.price >= min_price)
    if max_price is not None:
        query = query.filter(Product.price <= max_price)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
    products = query.order_by(*order_by).all()
    return ProductListOut(products=[ProductOut.model_validate(p) for p in products])


# Get Product by ID
@router.get("/{id}", response_model=ProductDetailOut)
def get_product_by_id(id: int, db: Session = Depends(get_db)):
    product = db.query(Product).filter(Product.id == id).first()
    if not product:
        raise NotFound("Product not found")
    return ProductDetailOut(product=ProductOut.model_validate(product))


# Create Product
@router.post("", response_model=ProductCreatedOut)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    if not payload.name or payload.price is None or not payload.category:
        raise InvalidArgument("Name, price, and category are required")
    if payload.price <= 0:
        raise InvalidArgument("Price must be greater than 0")
    stock = payload.stock or 0
    if stock < 0:
        raise InvalidArgument("Stock cannot be negative")

    product = Product(
        name=payload.name,
        description=payload.description or "",
        price=payload.price,
        category=payload.category,
        image_url=payload.image_url or "",
        stock=stock,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return ProductCreatedOut(message="Product created successfully", product=ProductOut.model_validate(product))
