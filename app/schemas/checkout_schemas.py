# app/schemas/checkout_schemas.py
from pydantic import BaseModel, ConfigDict

from app.schemas.cart_schemas import ShoppingCartResponse


class CheckoutSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    cart: ShoppingCartResponse
    item_cost: float            # sum of price * quantity
    shipping_cost: float
    customer_discount: float    # percent, e.g. 10.0 for premium customers
    total: float                # (item_cost + shipping_cost) minus customer discount


class CheckoutResult(CheckoutSummary):
    coupon_discount: float
    total_after_coupon: float   # total - coupon_discount
