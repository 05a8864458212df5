from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from flask import request

CENT = Decimal("0.01")
# Amount columns are Numeric(18, 2): at most 16 digits before the point.
MAX_AMOUNT = Decimal("9999999999999999.99")


def get_json_body():
    """Request JSON as a dict; anything else counts as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def has_required(data, *fields):
    """Every field is a non-empty string."""
    return all(isinstance(data.get(field), str) and data[field] != "" for field in fields)


def parse_amount(value):
    """
    Positive amount rounded to cents, from a JSON number or numeric string.
    Returns None when it does not fit the amount columns or rounds to zero.
    """
    if isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite() or amount <= 0 or amount > MAX_AMOUNT:
        return None

    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if amount <= 0 or amount > MAX_AMOUNT:
        return None
    return amount


def to_json_value(value):
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def serialize_row(row):
    return {key: to_json_value(value) for key, value in row.items()}
