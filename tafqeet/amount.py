"""
Monetary Amount Module

Coerces caller input into a fixed-point Decimal with the currency's number
of fractional digits (two for riyals and halalas) and splits it into major
and minor units. NEVER uses float arithmetic for the split.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from dataclasses import dataclass
from typing import Union
import re

from .currency import Currency

# Exclusive ceiling on the major-unit part
MAX_AMOUNT = Decimal(10) ** 9

DEFAULT_PRECISION = 2

# Minor units above 999 cannot be spelled by one hundreds group
MAX_PRECISION = 3

_ARABIC_DIGITS = str.maketrans(
    "٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹٫٬",
    "01234567890123456789.,",
)

# Longest first so "ريال سعودي" is removed before "ريال"
_CURRENCY_MARKS = tuple(sorted(
    {c.code for c in Currency}
    | {c.major_name for c in Currency}
    | {"ر.س", "ريال", "SR", "$", "€", "﷼"},
    key=len, reverse=True,
))

_NUMBER_PATTERN = re.compile(r"^[+-]?\d+(?:[.,]\d+)*$")

AmountLike = Union["Amount", Decimal, int, float, str]


class InvalidAmount(ValueError):
    """Raised when a value cannot be spelled out as a monetary amount"""

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid amount {value!r}: {reason}")


def _strip_currency_marks(text: str) -> str:
    for mark in _CURRENCY_MARKS:
        if text.upper().startswith(mark.upper()):
            text = text[len(mark):].strip()
        if text.upper().endswith(mark.upper()):
            text = text[:-len(mark)].strip()
    return text


def parse_amount(text: str) -> Decimal:
    """
    Parse a user-entered amount string into a Decimal

    Accepts a currency code, name or symbol at either end, thousands
    separators, Arabic-Indic digits and the Arabic decimal separator.
    Anything else, exponents included, is rejected rather than guessed at.

    Args:
        text: String representation of the amount

    Returns:
        Decimal value (not yet rounded)

    Raises:
        InvalidAmount: If the string does not hold a number
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidAmount(text, "value must be a non-empty string")

    normalized = text.strip().translate(_ARABIC_DIGITS)
    if normalized.lower().lstrip("+-") in ("nan", "inf", "infinity"):
        raise InvalidAmount(text, "amount must be finite")

    clean_value = _strip_currency_marks(normalized)
    if not _NUMBER_PATTERN.match(clean_value):
        raise InvalidAmount(text, "not a number")

    if "," in clean_value and "." in clean_value:
        # Both present - comma is the thousands separator
        clean_value = clean_value.replace(",", "")
    elif clean_value.count(",") == 1:
        whole, frac = clean_value.split(",")
        if len(frac) <= 2:
            clean_value = f"{whole}.{frac}"
        else:
            clean_value = whole + frac
    else:
        clean_value = clean_value.replace(",", "")

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise InvalidAmount(text, "not a number") from None


def _to_decimal(value) -> Decimal:
    # bool is an int subclass; True riyals is never intended
    if isinstance(value, bool):
        raise InvalidAmount(value, "boolean is not an amount")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        return parse_amount(value)
    raise InvalidAmount(value, f"unsupported type {type(value).__name__}")


@dataclass(frozen=True)
class Amount:
    """
    Immutable amount rounded to the currency precision (ROUND_HALF_UP).

    Precision is the number of fractional digits: 2 for riyals and halalas,
    3 for dinars subdivided into fils. The sign is kept so callers can
    render negative balances; the unit split always works on the absolute
    value.
    """
    value: Decimal
    precision: int = DEFAULT_PRECISION

    def __post_init__(self):
        if isinstance(self.precision, bool) or self.precision not in range(MAX_PRECISION + 1):
            raise ValueError(f"Precision must be 0-{MAX_PRECISION}, got {self.precision!r}")

        raw = self.value
        value = _to_decimal(raw)

        if not value.is_finite():
            raise InvalidAmount(raw, "amount must be finite")
        if abs(value) >= MAX_AMOUNT:
            raise InvalidAmount(raw, f"amount must be below {MAX_AMOUNT:,}")

        rounded = value.quantize(
            Decimal('0.1') ** self.precision,
            rounding=ROUND_HALF_UP
        )
        # Rounding can carry 999999999.995 over the ceiling
        if abs(rounded) >= MAX_AMOUNT:
            raise InvalidAmount(raw, f"amount must be below {MAX_AMOUNT:,}")

        object.__setattr__(self, "value", rounded)

    @classmethod
    def of(cls, value: AmountLike, precision: int = DEFAULT_PRECISION) -> "Amount":
        """Coerce int, float, Decimal, numeric string or Amount at the given precision"""
        if isinstance(value, cls):
            if value.precision == precision:
                return value
            return cls(value.value, precision)
        return cls(value, precision)

    @classmethod
    def for_currency(cls, value: AmountLike, currency: Currency) -> "Amount":
        """Amount rounded to the currency's minor unit"""
        return cls.of(value, currency.precision)

    @property
    def minor_units(self) -> int:
        """Minor units per major unit, e.g. 100 halalas or 1000 fils"""
        return 10 ** self.precision

    @property
    def integer_part(self) -> int:
        """Whole major units of the absolute value"""
        return int(abs(self.value))

    @property
    def fractional_part(self) -> int:
        """Minor units of the absolute value, always below minor_units"""
        return int((abs(self.value) - self.integer_part) * self.minor_units)

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.value == Decimal("0")

    def is_negative(self) -> bool:
        """Check if amount is below zero"""
        return self.value < Decimal("0")
