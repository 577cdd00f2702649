from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel
from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from app.utils.clock import utc_now


# ---------- ENUMS ----------

class CustomerType(str, Enum):
    standard = "standard"
    premium = "premium"


class ShippingMethod(str, Enum):
    # ordered from cheapest to most expensive
    standard = "standard"
    express = "express"
    expedited = "expedited"
    priority = "priority"


# ---------- DOMAIN ----------

class Address(BaseModel):
    country: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None


class LineItem(BaseModel):
    product_id: str
    product_name: str = ""
    price: float = 0.0
    quantity: int = 1


class Cart(BaseModel):
    id: Optional[str] = None
    customer_id: Optional[str] = None
    customer_type: CustomerType = CustomerType.standard
    shipping_address: Optional[Address] = None
    shipping_method: ShippingMethod = ShippingMethod.standard
    items: List[LineItem] = []

    def find_item(self, product_id: str) -> Optional[LineItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None


# ---------- TABLE ----------

class CartRecord(SQLModel, table=True):
    """A cart stored as one JSON document keyed by its id."""

    __tablename__ = "cart"
    id: str = Field(primary_key=True)
    customer_id: Optional[str] = Field(default=None, index=True)

    data: dict = Field(sa_column=Column(JSON, nullable=False))

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
