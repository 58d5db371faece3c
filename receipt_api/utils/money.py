# receipt_api/utils/money.py
import re

from ..errors import ParseError

# dollars "." cents, nothing before or after
_AMOUNT_RE = re.compile(r"([0-9]+)\.([0-9]+)")

Cents = int


def parse_amount(text, field: str = "amount") -> Cents:
    """Convert a ``"D.DD"`` money string to integer cents, e.g. "67.10" -> 6710.

    Dollars and cents are read independently. Cent digits beyond the second are
    dropped by keeping the cents value modulo 100; nothing is rounded.
    """
    if not isinstance(text, str):
        raise ParseError(field, text, "expected a string like '12.34'")
    m = _AMOUNT_RE.fullmatch(text)
    if not m:
        raise ParseError(field, text, "expected a string like '12.34'")
    dollars, cents = int(m.group(1)), int(m.group(2))
    return dollars * 100 + cents % 100


def format_amount(cents: Cents) -> str:
    return f"{cents // 100}.{cents % 100:02d}"
