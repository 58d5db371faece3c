# --- receipt_api/utils/api.py ---
from flask import jsonify


def api_ok(data=None, status=200):
    r = jsonify(data or {})
    r.status_code = status
    return r


def api_error(message, status=400, data=None):
    r = jsonify({"error": message, **(data or {})})
    r.status_code = status
    return r
