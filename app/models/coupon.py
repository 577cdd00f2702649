from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field


class CouponType(str, Enum):
    amount = "amount"           # fixed value off the total
    percentage = "percentage"   # percent of the total


class Coupon(SQLModel, table=True):
    id: Optional[str] = Field(default=None, primary_key=True)

    coupon_type: CouponType = CouponType.amount
    value: float = 0.0
    expiration: datetime
