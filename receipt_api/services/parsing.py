# receipt_api/services/parsing.py
import re
from datetime import date, datetime, time

from ..errors import ParseError, ValidationError
from ..model import Receipt, ReceiptItem
from ..utils.money import parse_amount

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_date(text, field: str = "purchaseDate") -> date:
    if not isinstance(text, str) or not _DATE_RE.fullmatch(text):
        raise ParseError(field, text, "expected YYYY-MM-DD")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError as e:
        raise ParseError(field, text, str(e)) from e


def parse_time(text, field: str = "purchaseTime"):
    """Parse 24-hour ``H:MM``/``HH:MM`` into ``(hour, minute)``."""
    if not isinstance(text, str):
        raise ParseError(field, text, "expected HH:MM")
    m = _TIME_RE.fullmatch(text)
    if not m:
        raise ParseError(field, text, "expected HH:MM")
    hour, minute = int(m.group(1)), int(m.group(2))
    if not 0 <= hour <= 23:
        raise ValidationError(f"{field} hour", hour, "must be >= 0 and <= 23")
    if not 0 <= minute <= 59:
        raise ValidationError(f"{field} minute", minute, "must be >= 0 and <= 59")
    return hour, minute


def combine(day: date, hour: int, minute: int) -> datetime:
    return datetime.combine(day, time(hour, minute))


def _text(payload: dict, key: str, default=None):
    value = payload.get(key, default)
    if value is None:
        value = default
    if value is not None and not isinstance(value, str):
        raise ParseError(key, value, "expected a string")
    return value


def receipt_from_payload(payload) -> Receipt:
    """
    Build an unscored Receipt from a submission document:
      {"retailer": "...", "purchaseDate": "YYYY-MM-DD", "purchaseTime": "HH:MM",
       "items": [{"shortDescription": "...", "price": "D.DD"}, ...], "total": "D.DD"}
    """
    if not isinstance(payload, dict):
        raise ParseError("receipt", payload, "expected a JSON object")

    retailer = _text(payload, "retailer", "")

    day = parse_date(_text(payload, "purchaseDate"))
    hour, minute = parse_time(_text(payload, "purchaseTime"))

    raw_items = payload.get("items")
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise ParseError("items", raw_items, "expected a list")

    items = []
    for i, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            raise ParseError(f"items[{i}]", raw, "expected a JSON object")
        description = _text(raw, "shortDescription", "")
        price = parse_amount(_text(raw, "price"), field=f"items[{i}].price")
        items.append(ReceiptItem(description=description, price=price))

    total = parse_amount(_text(payload, "total"), field="total")

    return Receipt(
        retailer=retailer,
        purchased_at=combine(day, hour, minute),
        items=items,
        total=total,
    )
