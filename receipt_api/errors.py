# receipt_api/errors.py
"""Error types raised while parsing, scoring and storing receipts."""


class ReceiptError(Exception):
    """Base class; ``status_code`` is what the HTTP layer responds with."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ParseError(ReceiptError):
    """Input text does not match the lexical pattern required for a field."""

    status_code = 400

    def __init__(self, field, value, reason=None):
        message = f"failed to parse {field} {value!r}"
        if reason:
            message = f"{message}, {reason}"
        super().__init__(message)
        self.field = field
        self.value = value


class ValidationError(ReceiptError):
    """Input is well formed but out of range (hour/minute bounds)."""

    status_code = 400

    def __init__(self, field, value, reason=None):
        message = f"invalid {field} value '{value}'"
        if reason:
            message = f"{message}, {reason}"
        super().__init__(message)
        self.field = field
        self.value = value


class NotFoundError(ReceiptError):
    status_code = 404

    def __init__(self, receipt_id):
        super().__init__(f"no receipt with ID {receipt_id!r} exists")
        self.receipt_id = receipt_id


class RandomSourceError(ReceiptError):
    """The secure random source could not produce bytes for an identifier."""

    status_code = 500
