from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.models.coupon import CouponType


class CreateCouponRequest(BaseModel):
    coupon_type: CouponType = CouponType.amount
    value: float
    expiration: datetime


class CouponResponse(BaseModel):
    id: Optional[str]
    coupon_type: CouponType
    value: float
    expiration: datetime
