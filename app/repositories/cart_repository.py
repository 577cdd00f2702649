# app/repositories/cart_repository.py
import logging
from typing import List, Optional, Protocol, Union
from uuid import uuid4

from sqlmodel import Session, select

from app.exceptions import NotFoundError
from app.models.cart import Cart, CartRecord
from app.utils.clock import utc_now

logger = logging.getLogger(__name__)


class CartRepository(Protocol):
    """
    Key-value store for carts.

    update() overwrites the whole document; callers doing read-modify-write
    from concurrent requests need optimistic concurrency on top of this.
    """

    def create(self, cart: Cart) -> Cart: ...

    def find_by_id(self, cart_id: str) -> Optional[Cart]: ...

    def find_all(self) -> List[Cart]: ...

    def update(self, cart_id: str, cart: Cart) -> None: ...

    def remove(self, cart: Union[str, Cart]) -> None: ...


class SQLCartRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, cart: Cart) -> Cart:
        if not cart.id:
            cart.id = uuid4().hex

        record = CartRecord(
            id=cart.id,
            customer_id=cart.customer_id,
            data=cart.model_dump(mode="json"),
        )
        self.session.add(record)
        self.session.commit()

        logger.info(f"Cart {cart.id} created for customer {cart.customer_id}")
        return cart

    def find_by_id(self, cart_id: str) -> Optional[Cart]:
        record = self.session.get(CartRecord, cart_id)
        if not record:
            return None
        return Cart.model_validate(record.data)

    def find_all(self) -> List[Cart]:
        records = self.session.exec(
            select(CartRecord).order_by(CartRecord.created_at)
        ).all()
        return [Cart.model_validate(record.data) for record in records]

    def update(self, cart_id: str, cart: Cart) -> None:
        record = self.session.get(CartRecord, cart_id)
        if not record:
            raise NotFoundError("Cart", cart_id)

        cart.id = cart_id
        record.customer_id = cart.customer_id
        record.data = cart.model_dump(mode="json")
        record.updated_at = utc_now()

        self.session.add(record)
        self.session.commit()

    def remove(self, cart: Union[str, Cart]) -> None:
        cart_id = cart.id if isinstance(cart, Cart) else cart
        record = self.session.get(CartRecord, cart_id)
        if not record:
            return

        self.session.delete(record)
        self.session.commit()
        logger.info(f"Cart {cart_id} removed")
