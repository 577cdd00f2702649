"""
Domain exceptions for the shopping cart service.

Engines and managers raise these; the HTTP layer maps them to status codes
in ``app.main``.
"""

from typing import Any, Dict, Optional


class ShoppingCartError(Exception):
    """Base exception for all shopping cart errors."""

    status_code = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.replace("Error", "").lower()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {
            "error": self.message,
            "code": self.code,
            "type": self.__class__.__name__,
        }
        if self.details:
            result["details"] = self.details
        return result


class NotFoundError(ShoppingCartError):
    """Raised when a cart, coupon or cart item cannot be resolved."""

    status_code = 404

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} {resource_id} not found",
            code="not_found",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class BadRequestError(ShoppingCartError):
    status_code = 400


class MissingDataError(BadRequestError):
    """Raised when checkout is attempted on a cart without a shipping address."""


class InvalidCouponError(BadRequestError):
    """Raised for expired coupons and coupons with a negative value."""


class DuplicateItemError(BadRequestError):
    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product {product_id} appears more than once",
            code="duplicate_item",
            details={"product_id": product_id},
        )
        self.product_id = product_id


class InvalidAddressError(BadRequestError):
    pass
