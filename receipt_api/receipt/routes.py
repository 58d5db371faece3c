# receipt_api/receipt/routes.py

from flask import request, current_app

from ..errors import ParseError, ValidationError
from ..extensions import receipt_store
from ..services.receipt_service import process_receipt, get_points
from ..utils.api import api_ok, api_error
from . import bp


@bp.post("/process")
def process():
    """
    Body:
      retailer, purchaseDate (YYYY-MM-DD), purchaseTime (HH:MM),
      items [{shortDescription, price}], total
    Returns {"id": "<uuid>"}
    """
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        return api_error("failed to parse process receipt request, body must be a JSON object", 400)

    try:
        receipt = process_receipt(receipt_store(), payload)
    except (ParseError, ValidationError) as e:
        current_app.logger.warning("rejected receipt: %s", e.message)
        return api_error(f"invalid process receipt request, {e.message}", e.status_code)

    current_app.logger.info("processed receipt %s, %d points", receipt.id, receipt.points)
    return api_ok({"id": receipt.id})


@bp.get("/<receipt_id>/points")
def points(receipt_id: str):
    # NotFoundError is rendered as 404 by the app-level handler
    return api_ok({"points": get_points(receipt_store(), receipt_id)})
