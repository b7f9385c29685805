# courier/models/order.py
"""Order model"""
from typing import List, Dict, Any


class FormatError(ValueError):
    """Raised when a postal code does not follow the '<prefix>-<zone>' format"""


class Order:
    """Represents a delivery order

    Zone and urgency are derived from the raw fields on every access, so
    changing postal_code or priorities is reflected immediately.
    """

    def __init__(self, customer_name: str, postal_code: str, priorities: List[int]):
        self.customer_name: str = customer_name
        self.postal_code: str = postal_code
        self.priorities: List[int] = priorities

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Order':
        """Build an order from its JSON representation"""
        return cls(
            customer_name=data['customer_name'],
            postal_code=data['postal_code'],
            priorities=list(data.get('priorities') or [])
        )

    @property
    def zone(self) -> int:
        """Integer after the separator in the postal code"""
        from courier.config import POSTAL_CODE_SEPARATOR
        parts = self.postal_code.split(POSTAL_CODE_SEPARATOR)
        if len(parts) != 2:
            raise FormatError(
                f"Postal code {self.postal_code!r} must contain exactly one "
                f"'{POSTAL_CODE_SEPARATOR}' separator"
            )
        zone_part = parts[1]
        if not (zone_part.isascii() and zone_part.isdigit()):
            raise FormatError(
                f"Postal code {self.postal_code!r} has a non-numeric zone {zone_part!r}"
            )
        try:
            return int(zone_part)
        except ValueError as e:
            # digit strings past the interpreter's int conversion limit
            raise FormatError(
                f"Postal code zone of {len(zone_part)} digits is too long to parse"
            ) from e

    @property
    def urgency(self) -> int:
        """Sum of priorities divisible by 3 times distinct vowels in the customer name"""
        from courier.utils import sum_divisible, distinct_vowels
        return sum_divisible(self.priorities) * distinct_vowels(self.customer_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'customer_name': self.customer_name,
            'postal_code': self.postal_code,
            'priorities': list(self.priorities)
        }

    def __repr__(self) -> str:
        return f"Order({self.customer_name}, {self.postal_code}, {self.priorities})"
