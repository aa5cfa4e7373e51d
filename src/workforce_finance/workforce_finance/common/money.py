from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Iterable

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal:
    """Coerce JSON-ish numbers (int/float/str/None) into Decimal.

    Floats go through ``str`` so 35.1 stays 35.1 and not its binary expansion.
    """

    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc


def _quantize(value: Decimal, exp: Decimal) -> Decimal:
    """Quantize with enough precision for the integer digits of ``value``."""

    with localcontext() as ctx:
        if value.is_finite():
            ctx.prec = max(ctx.prec, value.adjusted() - exp.as_tuple().exponent + 2)
        return value.quantize(exp, rounding=ROUND_HALF_UP)


def round_money(value: Decimal) -> Decimal:
    return _quantize(value, MONEY_PLACES)


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator, 0 when the denominator is 0."""

    if not denominator:
        return ZERO
    return numerator / denominator


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    return safe_ratio(part, whole) * HUNDRED


def dsum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def round_to(value: Decimal, places: int) -> Decimal:
    return _quantize(value, Decimal(1).scaleb(-places))
