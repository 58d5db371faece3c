# receipt_api/services/scoring.py
"""
Reward points for a receipt.

Rules, each applied independently and summed:
  1) one point per letter or digit in the retailer name
  2) 50 points if the total is a round dollar amount
  3) 25 points if the total is a multiple of 0.25
  4) 5 points for every two items
  5) per item whose trimmed description length is a multiple of 3,
     price * 0.2 rounded up to the nearest point
  6) 6 points if the purchase day is odd
  7) 10 points if the purchase time is from 2:00pm up to 4:00pm

Points are never recalculated once assigned; to rescore a receipt its
points have to be cleared explicitly.
"""
from ..model import Receipt


def _retailer_chars(receipt: Receipt) -> int:
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def _round_dollar_total(receipt: Receipt) -> int:
    return 50 if receipt.total % 100 == 0 else 0


def _quarter_total(receipt: Receipt) -> int:
    return 25 if receipt.total % 25 == 0 else 0


def _item_pairs(receipt: Receipt) -> int:
    return 5 * (len(receipt.items) // 2)


def _item_descriptions(receipt: Receipt) -> int:
    points = 0
    for it in receipt.items:
        # length in UTF-8 bytes
        if len(it.description.strip().encode("utf-8")) % 3 != 0:
            continue
        # cents * 0.2 / 100 == cents / 500; round up on any remainder
        points += it.price // 500
        if it.price % 500:
            points += 1
    return points


def _odd_day(receipt: Receipt) -> int:
    return 6 if receipt.purchased_at.day % 2 else 0


def _afternoon(receipt: Receipt) -> int:
    return 10 if 14 <= receipt.purchased_at.hour < 16 else 0


RULES = (
    ("retailer_chars", _retailer_chars),
    ("round_dollar_total", _round_dollar_total),
    ("quarter_total", _quarter_total),
    ("item_pairs", _item_pairs),
    ("item_descriptions", _item_descriptions),
    ("odd_day", _odd_day),
    ("afternoon", _afternoon),
)


def explain_points(receipt: Receipt):
    """[(rule_name, points), ...] for every rule, ignoring assigned points."""
    return [(name, rule(receipt)) for name, rule in RULES]


def calculate_points(receipt: Receipt) -> int:
    if receipt.is_scored:
        return receipt.points
    return sum(points for _, points in explain_points(receipt))


def score_receipt(receipt: Receipt) -> Receipt:
    if not receipt.is_scored:
        receipt.points = calculate_points(receipt)
    return receipt
