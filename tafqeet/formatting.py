"""
Document Formatting Helpers

Pairs the numeric rendering of an amount with its words for printed
statements and vouchers.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .amount import Amount, AmountLike, InvalidAmount
from .config import get_config
from .currency import Currency
from .logging_config import get_logger, log_action
from .writer import to_words

logger = get_logger("tafqeet.formatting")


@dataclass(frozen=True)
class AmountWithWords:
    """Amount as printed: grouped digits and the words line"""
    numeric: str
    words: str


def format_amount(amount: AmountLike) -> str:
    """Format with thousands separators and the amount's decimals, e.g. 1,234.50"""
    value = amount if isinstance(amount, Amount) else Amount.of(amount)
    return f"{value.value:,.{value.precision}f}"


def _resolve_currency(currency: Union[str, Currency, None]) -> Currency:
    if isinstance(currency, Currency):
        return currency
    return Currency.from_code(currency or get_config().default_currency)


def format_amount_with_words(amount: AmountLike,
                             currency: Union[str, Currency, None] = None,
                             closing_phrase: Optional[bool] = None) -> AmountWithWords:
    """
    Render an amount both as digits and as Arabic words

    Args:
        amount: Amount to render
        currency: Currency or ISO code; defaults to the configured currency
        closing_phrase: Append "لا غير"; defaults to the configured value

    Returns:
        AmountWithWords

    Raises:
        InvalidAmount: If the amount cannot be spelled out
        ValueError: If the currency code is unknown
    """
    resolved = _resolve_currency(currency)
    value = Amount.for_currency(amount, resolved)
    if closing_phrase is None:
        closing_phrase = get_config().closing_phrase

    return AmountWithWords(
        numeric=format_amount(value),
        words=to_words(value, resolved, closing_phrase=closing_phrase),
    )


def amount_in_words_or_placeholder(amount: AmountLike,
                                   currency: Union[str, Currency, None] = None,
                                   placeholder: Optional[str] = None) -> str:
    """
    Words for a printed document, or the placeholder when the amount is invalid

    Unknown currency codes still raise ValueError.
    """
    try:
        return format_amount_with_words(amount, currency).words
    except InvalidAmount as e:
        log_action(
            logger, "warning", f"Cannot write amount in words: {e.reason}",
            action="amount_in_words", resource="document",
            extra={"value": repr(e.value)}
        )
        return get_config().placeholder if placeholder is None else placeholder
