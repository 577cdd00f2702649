from typing import Optional

from app.models.cart import Address


class AddressValidator:
    def is_valid(self, address: Optional[Address]) -> bool:
        """True when country, city and street are all filled in."""
        if address is None:
            return False

        return all(
            value and value.strip()
            for value in (address.country, address.city, address.street)
        )
