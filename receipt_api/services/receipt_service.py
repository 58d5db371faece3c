# receipt_api/services/receipt_service.py
from ..model import Receipt
from .parsing import receipt_from_payload
from .receipt_store import ReceiptStore
from .scoring import score_receipt


def process_receipt(store: ReceiptStore, payload) -> Receipt:
    """Parse, score and store a submitted receipt; return it with its new id set.

    Raises ParseError/ValidationError before anything is stored.
    """
    receipt = score_receipt(receipt_from_payload(payload))
    store.put(receipt)
    return receipt


def get_points(store: ReceiptStore, receipt_id: str) -> int:
    return store.get(receipt_id).points
