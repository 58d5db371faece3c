# receipt_api/extensions.py
from flask import current_app
from flask_cors import CORS

from .services.receipt_store import ReceiptStore

cors = CORS()


def init_store(app, store: ReceiptStore | None = None):
    app.extensions["receipt_store"] = store if store is not None else ReceiptStore()


def receipt_store() -> ReceiptStore:
    return current_app.extensions["receipt_store"]
