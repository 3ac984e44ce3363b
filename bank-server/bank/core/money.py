"""Decimal helpers for monetary amounts stored as strings."""

from __future__ import annotations

import re
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, InvalidOperation, localcontext

# Addition and subtraction are exact under this context.
MONEY_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

ZERO = Decimal(0)

MAX_INTEGER_DIGITS = 131072
MAX_FRACTION_DIGITS = 16383

_DECIMAL_LITERAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_amount(text: str) -> Decimal:
    """Parse a decimal literal. Raises ``ValueError`` for anything that is not a finite number.

    Only plain literals are accepted: no underscores, no ``NaN``/``Infinity``.
    """
    if not isinstance(text, str) or not _DECIMAL_LITERAL.fullmatch(text.strip()):
        raise ValueError(f"invalid amount: {text!r}")
    try:
        value = Decimal(text.strip())
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {text!r}") from exc
    # same limits as a PostgreSQL numeric
    if value.adjusted() >= MAX_INTEGER_DIGITS or value.as_tuple().exponent < -MAX_FRACTION_DIGITS:
        raise ValueError(f"amount out of range: {text!r}")
    return value


def format_amount(value: Decimal) -> str:
    """Render ``value`` in plain positional notation (``"1000"``, ``"-0.50"``)."""
    text = format(value, "f")
    if text.startswith("-") and value.is_zero():
        return text[1:]
    return text


def add(left: Decimal, right: Decimal) -> Decimal:
    with localcontext(MONEY_CONTEXT):
        return left + right


def subtract(left: Decimal, right: Decimal) -> Decimal:
    with localcontext(MONEY_CONTEXT):
        return left - right


def negate(value: Decimal) -> Decimal:
    with localcontext(MONEY_CONTEXT):
        return -value


__all__ = ["ZERO", "parse_amount", "format_amount", "add", "subtract", "negate"]
