# receipt_api/model/receipt.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..utils.money import format_amount


@dataclass
class ReceiptItem:
    description: str
    price: int  # cents

    def as_dict(self):
        return {
            "shortDescription": self.description,
            "price": format_amount(self.price),
        }


@dataclass
class Receipt:
    """One purchase at a retailer.

    ``total`` is the declared sum of the item prices in cents. ``points`` stays
    ``None`` until the receipt is scored; after that it is never changed, so a
    later change to the scoring rules cannot alter points already earned.
    """

    retailer: str
    purchased_at: datetime
    items: List[ReceiptItem] = field(default_factory=list)
    total: int = 0
    points: Optional[int] = None
    id: Optional[str] = None

    @property
    def is_scored(self) -> bool:
        return self.points is not None

    def as_dict(self):
        return {
            "id": self.id,
            "retailer": self.retailer,
            "purchaseDate": self.purchased_at.strftime("%Y-%m-%d"),
            "purchaseTime": self.purchased_at.strftime("%H:%M"),
            "items": [it.as_dict() for it in self.items],
            "total": format_amount(self.total),
            "points": self.points,
        }
