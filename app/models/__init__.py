from app.models.cart import Address, Cart, CartRecord, CustomerType, LineItem, ShippingMethod
from app.models.coupon import Coupon, CouponType

# add ALL table models here so SQLModel.metadata sees them
