# app/services/cart_manager.py
import logging
from typing import List, Optional

from app.exceptions import DuplicateItemError, InvalidAddressError, NotFoundError
from app.models.cart import Cart, LineItem
from app.repositories.cart_repository import CartRepository
from app.repositories.coupon_repository import CouponRepository
from app.schemas.cart_schemas import CreateCartRequest, ItemRequest, ShoppingCartResponse
from app.schemas.checkout_schemas import CheckoutResult
from app.services.address_validator import AddressValidator
from app.services.checkout_engine import CheckoutEngine
from app.services.coupon_engine import CouponEngine
from app.services.mapper import cart_to_dto

logger = logging.getLogger(__name__)


class CartManager:
    def __init__(
        self,
        cart_repository: CartRepository,
        coupon_repository: CouponRepository,
        address_validator: AddressValidator,
        checkout_engine: CheckoutEngine,
        coupon_engine: CouponEngine,
    ):
        self.cart_repository = cart_repository
        self.coupon_repository = coupon_repository
        self.address_validator = address_validator
        self.checkout_engine = checkout_engine
        self.coupon_engine = coupon_engine

    # ---------- Queries ----------

    def get_all(self) -> List[ShoppingCartResponse]:
        return [cart_to_dto(cart) for cart in self.cart_repository.find_all()]

    def find_by_id(self, cart_id: str) -> Optional[ShoppingCartResponse]:
        cart = self.cart_repository.find_by_id(cart_id)
        if cart is None:
            return None
        return cart_to_dto(cart)

    def calculate_totals(self, cart_id: str, coupon_id: Optional[str] = None) -> CheckoutResult:
        """
        Checkout a cart, then take an optional coupon off the discounted total.

        Raises NotFoundError for an unknown cart or coupon; MissingDataError and
        InvalidCouponError propagate from the engines.
        """
        cart = self._get_cart(cart_id)

        summary = self.checkout_engine.calculate_totals(cart)

        coupon_discount = 0.0
        if coupon_id:
            coupon = self.coupon_repository.find_by_id(coupon_id)
            if coupon is None:
                raise NotFoundError("Coupon", coupon_id)
            coupon_discount = self.coupon_engine.calculate_discount(summary, coupon)

        return CheckoutResult(
            **summary.model_dump(),
            coupon_discount=coupon_discount,
            total_after_coupon=summary.total - coupon_discount,
        )

    # ---------- Mutations ----------

    def create(self, request: CreateCartRequest) -> ShoppingCartResponse:
        address = request.customer.address
        if not self.address_validator.is_valid(address):
            logger.warning(f"Rejected cart for customer {request.customer.id}: invalid address")
            raise InvalidAddressError("Shipping address requires country, city and street")

        seen = set()
        for item in request.items:
            if item.product_id in seen:
                logger.warning(
                    f"Rejected cart for customer {request.customer.id}: "
                    f"duplicate product {item.product_id}"
                )
                raise DuplicateItemError(item.product_id)
            seen.add(item.product_id)

        cart = Cart(
            customer_id=request.customer.id,
            customer_type=request.customer.customer_type,
            shipping_address=address,
            shipping_method=request.shipping_method,
            items=[LineItem(**item.model_dump()) for item in request.items],
        )

        return cart_to_dto(self.cart_repository.create(cart))

    def add_item(self, cart_id: str, item: ItemRequest) -> ShoppingCartResponse:
        cart = self._get_cart(cart_id)

        existing_item = cart.find_item(item.product_id)
        if existing_item:
            existing_item.quantity += item.quantity
        else:
            cart.items.append(LineItem(**item.model_dump()))

        self.cart_repository.update(cart_id, cart)
        logger.info(f"Cart {cart_id}: added {item.quantity} x {item.product_id}")
        return cart_to_dto(cart)

    def remove_item(self, cart_id: str, product_id: str) -> ShoppingCartResponse:
        cart = self._get_cart(cart_id)

        item = cart.find_item(product_id)
        if item is None:
            raise NotFoundError("Cart item", product_id)

        cart.items.remove(item)
        self.cart_repository.update(cart_id, cart)
        logger.info(f"Cart {cart_id}: removed {product_id}")
        return cart_to_dto(cart)

    def delete(self, cart_id: str) -> None:
        self.cart_repository.remove(cart_id)

    def _get_cart(self, cart_id: str) -> Cart:
        cart = self.cart_repository.find_by_id(cart_id)
        if cart is None:
            raise NotFoundError("Cart", cart_id)
        return cart
