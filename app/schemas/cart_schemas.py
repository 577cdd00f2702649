from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.cart import Address, CustomerType, ShippingMethod


class ItemRequest(BaseModel):
    product_id: str
    product_name: str = ""
    price: float = Field(default=0.0, ge=0)
    quantity: int = Field(default=1, gt=0)


class CustomerRequest(BaseModel):
    id: Optional[str] = None
    customer_type: CustomerType = CustomerType.standard
    address: Optional[Address] = None


class CreateCartRequest(BaseModel):
    customer: CustomerRequest
    shipping_method: ShippingMethod = ShippingMethod.standard
    items: List[ItemRequest] = []


class ItemResponse(BaseModel):
    product_id: str
    product_name: str
    price: float
    quantity: int


class ShoppingCartResponse(BaseModel):
    id: Optional[str]
    customer_id: Optional[str]
    customer_type: CustomerType
    shipping_address: Optional[Address]
    shipping_method: ShippingMethod
    items: List[ItemResponse]
