"""
Arabic Numeral Writer

Spells a monetary amount in Arabic for the "amount in words" line printed
on invoices, vouchers and statements. Pure functions over read-only tables;
safe to call from any number of threads.
"""

from typing import List, Optional, Sequence, Union

from .amount import Amount, AmountLike, InvalidAmount, MAX_AMOUNT
from .currency import Currency
from .logging_config import get_logger
from .numerals import (
    AND, CLOSING_PHRASE, DEFAULT_CURRENCY_NAME, DEFAULT_MINOR_UNIT_NAME,
    HUNDREDS, MILLION, MILLIONS_PLURAL, NEGATIVE, ONES, TEENS, TENS,
    THOUSAND, THOUSANDS_PLURAL, TWO_MILLION, TWO_THOUSAND, ZERO,
)

logger = get_logger("tafqeet.writer")


def _join(parts: Sequence[str]) -> str:
    """Join word groups with the conjunction attached to each following group"""
    parts = [part for part in parts if part]
    if not parts:
        return ""
    return " ".join([parts[0]] + [AND + part for part in parts[1:]])


def _below_100(n: int) -> str:
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]

    tens, ones = divmod(n, 10)
    if ones == 0:
        return TENS[tens]
    # Ones are read before tens: 28 is "eight and twenty"
    return _join([ONES[ones], TENS[tens]])


def convert_up_to_999(n: int) -> str:
    """
    Spell an integer in [0, 999]; zero yields an empty string

    Raises:
        ValueError: If n is outside [0, 999]
    """
    if not 0 <= n <= 999:
        raise ValueError(f"Expected 0-999, got {n}")

    hundreds, remainder = divmod(n, 100)
    return _join([HUNDREDS[hundreds], _below_100(remainder) if remainder else ""])


def _scale_words(count: int, singular: str, dual: str, plural: Sequence[str]) -> str:
    if count == 1:
        return singular
    if count == 2:
        return dual
    if count <= 10:
        return plural[count]
    return f"{convert_up_to_999(count)} {singular}"


def _below_million(n: int) -> str:
    thousands, remainder = divmod(n, 1000)
    parts: List[str] = []
    if thousands:
        parts.append(_scale_words(thousands, THOUSAND, TWO_THOUSAND, THOUSANDS_PLURAL))
    parts.append(convert_up_to_999(remainder))
    return _join(parts)


def integer_to_words(n: int) -> str:
    """
    Spell a non-negative whole number below one billion

    Args:
        n: Whole number of major units

    Returns:
        Arabic words, "صفر" for zero

    Raises:
        InvalidAmount: If n is not an int or is out of range
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidAmount(n, "expected a whole number")
    if n < 0 or n >= MAX_AMOUNT:
        raise InvalidAmount(n, f"whole number must be in [0, {MAX_AMOUNT:,})")

    if n == 0:
        return ZERO

    millions, remainder = divmod(n, 1_000_000)
    parts: List[str] = []
    if millions:
        parts.append(_scale_words(millions, MILLION, TWO_MILLION, MILLIONS_PLURAL))
    parts.append(_below_million(remainder))
    return _join(parts)


def _unit_names(currency_name: Union[str, Currency, None],
                minor_unit_name: Optional[str]) -> tuple:
    if isinstance(currency_name, Currency):
        major = currency_name.major_name
        minor = currency_name.minor_name
    else:
        major = (currency_name or "").strip() or DEFAULT_CURRENCY_NAME
        minor = DEFAULT_MINOR_UNIT_NAME

    if minor_unit_name and minor_unit_name.strip():
        minor = minor_unit_name.strip()
    return major, minor


def to_words(amount: AmountLike,
             currency_name: Union[str, Currency, None] = None,
             *,
             minor_unit_name: Optional[str] = None,
             closing_phrase: bool = False) -> str:
    """
    Write an amount out in Arabic words with its currency units.

    The whole part is followed by the major unit name and the minor units
    (halalas by default) are joined with the conjunction. A Currency also
    sets the precision, so a Kuwaiti dinar splits into 1000 fils. An amount
    with no whole part reads as its minor units alone; exactly zero reads as
    "صفر ريال سعودي". Negative amounts are prefixed with "سالب".

    Args:
        amount: int, float, Decimal, numeric string or Amount
        currency_name: Major unit name, or a Currency for both unit names
        minor_unit_name: Override for the minor unit name
        closing_phrase: Append "لا غير" as printed on vouchers

    Returns:
        The amount in words, single-spaced with no surrounding whitespace

    Raises:
        InvalidAmount: For non-finite, unparsable or out-of-range input
    """
    if isinstance(currency_name, Currency):
        value = Amount.for_currency(amount, currency_name)
    else:
        value = Amount.of(amount)
    major, minor = _unit_names(currency_name, minor_unit_name)

    integer_part = value.integer_part
    fractional_part = value.fractional_part

    parts: List[str] = []
    if integer_part or not fractional_part:
        parts.append(f"{integer_to_words(integer_part)} {major}")
    if fractional_part:
        parts.append(f"{convert_up_to_999(fractional_part)} {minor}")

    words = _join(parts)
    if value.is_negative():
        words = f"{NEGATIVE} {words}"
    if closing_phrase:
        words = f"{words} {CLOSING_PHRASE}"

    logger.debug(f"Converted amount {value.value} to words")
    return words
