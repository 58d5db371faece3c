# ------ receipt_api/model/__init__.py ------

from .receipt import Receipt, ReceiptItem
from .types import new_receipt_id

__all__ = [
    "Receipt",
    "ReceiptItem",
    "new_receipt_id",
]
