import logging
from typing import Optional

from app.models.coupon import Coupon
from app.repositories.coupon_repository import CouponRepository
from app.schemas.coupon_schemas import CouponResponse, CreateCouponRequest
from app.services.mapper import coupon_to_dto

logger = logging.getLogger(__name__)


class CouponManager:
    def __init__(self, coupon_repository: CouponRepository):
        self.coupon_repository = coupon_repository

    def create(self, request: CreateCouponRequest) -> CouponResponse:
        coupon = Coupon(
            coupon_type=request.coupon_type,
            value=request.value,
            expiration=request.expiration,
        )
        return coupon_to_dto(self.coupon_repository.create(coupon))

    def find_by_id(self, coupon_id: str) -> Optional[CouponResponse]:
        coupon = self.coupon_repository.find_by_id(coupon_id)
        if coupon is None:
            return None
        return coupon_to_dto(coupon)

    def delete(self, coupon_id: str) -> None:
        self.coupon_repository.delete_by_id(coupon_id)
