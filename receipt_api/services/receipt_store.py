# receipt_api/services/receipt_store.py
from typing import Callable, Dict

from ..errors import NotFoundError
from ..model import Receipt, new_receipt_id
from ..utils.rwlock import RWLock


class ReceiptStore:
    """In-memory receipts keyed by id; safe to share between request threads.

    Entries live as long as the process. Parse and score a receipt before
    calling ``put``: only the dict update happens under the lock.
    """

    def __init__(self, id_factory: Callable[[], str] = new_receipt_id):
        self._id_factory = id_factory
        self._lock = RWLock()
        self._receipts: Dict[str, Receipt] = {}

    def put(self, receipt: Receipt) -> str:
        if receipt.id is None:
            receipt.id = self._id_factory()
        with self._lock.write():
            self._receipts[receipt.id] = receipt
        return receipt.id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock.read():
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise NotFoundError(receipt_id)
        return receipt

    def __contains__(self, receipt_id) -> bool:
        with self._lock.read():
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._receipts)
