# app/repositories/coupon_repository.py
import logging
from typing import Optional, Protocol
from uuid import uuid4

from sqlmodel import Session

from app.models.coupon import Coupon

logger = logging.getLogger(__name__)


class CouponRepository(Protocol):
    def create(self, coupon: Coupon) -> Coupon: ...

    def find_by_id(self, coupon_id: str) -> Optional[Coupon]: ...

    def delete_by_id(self, coupon_id: str) -> None: ...


class SQLCouponRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, coupon: Coupon) -> Coupon:
        if not coupon.id:
            coupon.id = uuid4().hex

        self.session.add(coupon)
        self.session.commit()
        self.session.refresh(coupon)

        logger.info(f"Coupon {coupon.id} created")
        return coupon

    def find_by_id(self, coupon_id: str) -> Optional[Coupon]:
        return self.session.get(Coupon, coupon_id)

    def delete_by_id(self, coupon_id: str) -> None:
        coupon = self.session.get(Coupon, coupon_id)
        if not coupon:
            return

        self.session.delete(coupon)
        self.session.commit()
        logger.info(f"Coupon {coupon_id} deleted")
