# app/services/coupon_engine.py
import logging

from app.exceptions import InvalidCouponError
from app.models.coupon import Coupon, CouponType
from app.schemas.checkout_schemas import CheckoutSummary
from app.utils.clock import Clock, as_utc, utc_now

logger = logging.getLogger(__name__)


class CouponEngine:
    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def calculate_discount(self, summary: CheckoutSummary, coupon: Coupon) -> float:
        """
        Amount coupons take their value off the total, percentage coupons a
        share of it. The amount is not capped at the total.
        """
        if coupon.value < 0:
            raise InvalidCouponError(
                f"Coupon {coupon.id} has a negative value",
                details={"coupon_id": coupon.id, "value": coupon.value},
            )

        if as_utc(coupon.expiration) < self.clock():
            raise InvalidCouponError(
                f"Coupon {coupon.id} expired",
                details={
                    "coupon_id": coupon.id,
                    "expiration": as_utc(coupon.expiration).isoformat(),
                },
            )

        if coupon.coupon_type == CouponType.percentage:
            discount = summary.total * (coupon.value / 100.0)
        else:
            discount = coupon.value

        logger.info(f"Coupon {coupon.id} ({CouponType(coupon.coupon_type).value}) discount: {discount}")
        return discount
