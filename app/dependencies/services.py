from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.cart_repository import SQLCartRepository
from app.repositories.coupon_repository import SQLCouponRepository
from app.services.address_validator import AddressValidator
from app.services.cart_manager import CartManager
from app.services.checkout_engine import CheckoutEngine
from app.services.coupon_engine import CouponEngine
from app.services.coupon_manager import CouponManager
from app.services.shipping_calculator import ShippingCalculator


def get_cart_repository(session: Session = Depends(get_session)) -> SQLCartRepository:
    return SQLCartRepository(session)


def get_coupon_repository(session: Session = Depends(get_session)) -> SQLCouponRepository:
    return SQLCouponRepository(session)


def get_checkout_engine() -> CheckoutEngine:
    return CheckoutEngine(ShippingCalculator())


def get_coupon_engine() -> CouponEngine:
    return CouponEngine()


def get_cart_manager(
    cart_repository: SQLCartRepository = Depends(get_cart_repository),
    coupon_repository: SQLCouponRepository = Depends(get_coupon_repository),
    checkout_engine: CheckoutEngine = Depends(get_checkout_engine),
    coupon_engine: CouponEngine = Depends(get_coupon_engine),
) -> CartManager:
    return CartManager(
        cart_repository=cart_repository,
        coupon_repository=coupon_repository,
        address_validator=AddressValidator(),
        checkout_engine=checkout_engine,
        coupon_engine=coupon_engine,
    )


def get_coupon_manager(
    coupon_repository: SQLCouponRepository = Depends(get_coupon_repository),
) -> CouponManager:
    return CouponManager(coupon_repository)
