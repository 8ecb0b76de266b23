import logging

from sqlalchemy.orm import Session

from storefront.models.product import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "description": "High-quality wireless headphones with noise cancellation",
        "price": 199.99,
        "category": "Electronics",
        "image_url": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=400",
        "stock": 50,
    },
    {
        "name": "Smart Watch",
        "description": "Feature-rich smartwatch with health monitoring",
        "price": 299.99,
        "category": "Electronics",
        "image_url": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=400",
        "stock": 30,
    },
    {
        "name": "Coffee Maker",
        "description": "Automatic coffee maker with programmable settings",
        "price": 89.99,
        "category": "Home & Kitchen",
        "image_url": "https://images.unsplash.com/photo-1495474472287-4d71bcdd2085?w=400",
        "stock": 25,
    },
    {
        "name": "Running Shoes",
        "description": "Comfortable running shoes for all terrains",
        "price": 129.99,
        "category": "Sports",
        "image_url": "https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=400",
        "stock": 40,
    },
    {
        "name": "Laptop Backpack",
        "description": "Durable laptop backpack with multiple compartments",
        "price": 59.99,
        "category": "Accessories",
        "image_url": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=400",
        "stock": 35,
    },
    {
        "name": "Bluetooth Speaker",
        "description": "Portable Bluetooth speaker with excellent sound quality",
        "price": 79.99,
        "category": "Electronics",
        "image_url": "https://images.unsplash.com/photo-1608043152269-423dbba4e7e1?w=400",
        "stock": 60,
    },
]


def insert_sample_products(db: Session) -> int:
    """Insert the sample catalog when the products table is empty. Returns rows inserted."""
    if db.query(Product.id).first():
        return 0
    db.add_all([Product(**p) for p in SAMPLE_PRODUCTS])
    db.commit()
    logger.info("Seeded %d sample products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
