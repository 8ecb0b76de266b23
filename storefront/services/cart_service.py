import logging
from decimal import Decimal
from typing import List

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.errors import InternalError, InvalidArgument, NotFound
from storefront.models.cart import CartLine
from storefront.models.product import Product
from storefront.schemas.cart import CartItemOut, CartOut

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def _require_positive_quantity(quantity) -> int:
    # bool is an int subclass; reject it explicitly
    if quantity is None or isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidArgument("Quantity must be at least 1")
    return quantity


class CartService:
    """Cart operations for one verified user.

    Every query filters on ``user_id``; a line owned by someone else is
    indistinguishable from a missing one for the caller.
    """

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def get_cart(self) -> CartOut:
        try:
            rows = self.db.execute(
                select(CartLine, Product)
                .join(Product, CartLine.product_id == Product.id)
                .where(CartLine.user_id == self.user_id)
                .order_by(CartLine.created_at.desc(), CartLine.id.desc())
            ).all()
        except SQLAlchemyError:
            logger.exception("Get cart failed for user %s", self.user_id)
            raise InternalError()

        items: List[CartItemOut] = []
        total = Decimal("0")
        for line, product in rows:
            price = Decimal(str(product.price))
            line_total = price * line.quantity
            total += line_total
            items.append(
                CartItemOut(
                    cart_id=line.id,
                    product_id=product.id,
                    name=product.name,
                    description=product.description,
                    price=float(price),
                    category=product.category,
                    image_url=product.image_url,
                    quantity=line.quantity,
                    total_price=float(line_total),
                )
            )
        return CartOut(cartItems=items, totalAmount=float(total), itemCount=len(items))

    def add_item(self, product_id, quantity=1) -> None:
        if not product_id:
            raise InvalidArgument("Product ID is required")
        quantity = _require_positive_quantity(quantity)

        try:
            product = self.db.execute(
                select(Product.id, Product.stock).where(Product.id == product_id)
            ).first()
            if not product:
                raise NotFound("Product not found")
            # Stock is not checked here; carts may exceed available stock
            self.db.execute(self._upsert_statement(product_id, quantity))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Add to cart failed for user %s product %s", self.user_id, product_id)
            raise InternalError()
        logger.info("User %s added product %s x%s to cart", self.user_id, product_id, quantity)

    def _upsert_statement(self, product_id: int, quantity: int):
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise InternalError(f"Cart upsert is not supported on {dialect}")
        stmt = insert(CartLine).values(user_id=self.user_id, product_id=product_id, quantity=quantity)
        return stmt.on_conflict_do_update(
            index_elements=["user_id", "product_id"],
            set_={"quantity": CartLine.quantity + stmt.excluded.quantity},
        )

    def _owned_line(self, cart_id: int) -> CartLine:
        line = (
            self.db.query(CartLine)
            .filter(CartLine.id == cart_id, CartLine.user_id == self.user_id)
            .first()
        )
        if line:
            return line
        if self.db.query(CartLine.id).filter(CartLine.id == cart_id).first():
            logger.warning("User %s tried to access cart line %s owned by another user", self.user_id, cart_id)
        else:
            logger.info("Cart line %s does not exist (user %s)", cart_id, self.user_id)
        raise NotFound("Cart item not found")

    def update_quantity(self, cart_id: int, quantity) -> None:
        quantity = _require_positive_quantity(quantity)
        try:
            line = self._owned_line(cart_id)
            line.quantity = quantity
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Update cart line %s failed for user %s", cart_id, self.user_id)
            raise InternalError()

    def remove_item(self, cart_id: int) -> None:
        try:
            line = self._owned_line(cart_id)
            self.db.delete(line)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Remove cart line %s failed for user %s", cart_id, self.user_id)
            raise InternalError()
