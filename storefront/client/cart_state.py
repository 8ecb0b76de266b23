"""Client-side mirror of the signed-in user's cart.

Every mutation is followed by a full refetch, so after a successful call the
mirror equals the server's cart at the time of that refetch. Nothing is
patched locally and nothing is retried.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class CartFailure(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"


_STATUS_FAILURES = {
    400: CartFailure.INVALID_ARGUMENT,
    401: CartFailure.UNAUTHENTICATED,
    404: CartFailure.NOT_FOUND,
}


@dataclass(frozen=True)
class CartResult:
    ok: bool
    failure: Optional[CartFailure] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "CartResult":
        return cls(ok=True)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "CartResult":
        if response.is_success:
            return cls.success()
        failure = _STATUS_FAILURES.get(response.status_code, CartFailure.SERVER_ERROR)
        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get("error") if isinstance(body, dict) else None
        return cls(ok=False, failure=failure, message=message)


class CartState:
    """Holds ``cart_items``, ``total_amount`` and ``item_count`` for one token.

    ``http`` is any ``httpx.Client`` whose base URL points at the API root
    (the FastAPI ``TestClient`` works too).
    """

    def __init__(self, http: httpx.Client, token: Optional[str] = None, cart_path: str = "/api/cart"):
        self.http = http
        self.token = token
        self.cart_path = cart_path.rstrip("/")
        self.cart_items: List[Dict[str, Any]] = []
        self.total_amount: float = 0.0
        self.item_count: int = 0
        self.loading = False

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def _reset(self) -> None:
        self.cart_items = []
        self.total_amount = 0.0
        self.item_count = 0

    def set_token(self, token: Optional[str]) -> CartResult:
        """Switch user (or log out with ``None``) and reload the mirror."""
        self.token = token
        return self.refresh()

    def refresh(self) -> CartResult:
        if not self.token:
            # Logged out: local reset, no request
            self._reset()
            return CartResult(ok=False, failure=CartFailure.UNAUTHENTICATED)

        self.loading = True
        try:
            response = self.http.get(self.cart_path, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("Error fetching cart: %s", e)
            return CartResult(ok=False, failure=CartFailure.NETWORK_ERROR)
        finally:
            self.loading = False

        result = CartResult.from_response(response)
        if not result:
            logger.warning("Fetching cart failed: %s %s", response.status_code, result.message)
            return result
        try:
            data = response.json()
            cart_items = data["cartItems"]
            total_amount = data["totalAmount"]
            item_count = data["itemCount"]
        except (ValueError, TypeError, KeyError):
            logger.error("Unexpected cart body from server (status %s)", response.status_code)
            return CartResult(ok=False, failure=CartFailure.SERVER_ERROR)
        self.cart_items = cart_items
        self.total_amount = total_amount
        self.item_count = item_count
        return result

    def _mutate(self, method: str, url: str, action: str, body: Optional[Dict[str, Any]] = None) -> CartResult:
        if not self.token:
            return CartResult(ok=False, failure=CartFailure.UNAUTHENTICATED)
        try:
            response = self.http.request(method, url, json=body, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("Error %s: %s", action, e)
            return CartResult(ok=False, failure=CartFailure.NETWORK_ERROR)

        result = CartResult.from_response(response)
        if not result:
            logger.warning("Error %s: %s %s", action, response.status_code, result.message)
            return result
        # The mutation succeeded; the refetch only updates the mirror
        self.refresh()
        return result

    def add_to_cart(self, product_id: int, quantity: int = 1) -> CartResult:
        return self._mutate(
            "POST", self.cart_path, "adding to cart", {"productId": product_id, "quantity": quantity}
        )

    def update_cart_item(self, cart_id: int, quantity: int) -> CartResult:
        return self._mutate("PUT", f"{self.cart_path}/{cart_id}", "updating cart item", {"quantity": quantity})

    def remove_from_cart(self, cart_id: int) -> CartResult:
        return self._mutate("DELETE", f"{self.cart_path}/{cart_id}", "removing from cart")
