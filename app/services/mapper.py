from app.models.cart import Cart
from app.models.coupon import Coupon
from app.schemas.cart_schemas import ItemResponse, ShoppingCartResponse
from app.schemas.coupon_schemas import CouponResponse


def cart_to_dto(cart: Cart) -> ShoppingCartResponse:
    return ShoppingCartResponse(
        id=cart.id,
        customer_id=cart.customer_id,
        customer_type=cart.customer_type,
        shipping_address=cart.shipping_address,
        shipping_method=cart.shipping_method,
        items=[
            ItemResponse(
                product_id=item.product_id,
                product_name=item.product_name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in cart.items
        ],
    )


def coupon_to_dto(coupon: Coupon) -> CouponResponse:
    return CouponResponse(
        id=coupon.id,
        coupon_type=coupon.coupon_type,
        value=coupon.value,
        expiration=coupon.expiration,
    )
