"""
Tafqeet

Arabic amount-in-words for invoices, payment vouchers and account
statements, with proper Decimal handling of riyals and halalas.
"""

from .amount import Amount, InvalidAmount, parse_amount
from .currency import Currency
from .formatting import (
    AmountWithWords, amount_in_words_or_placeholder, format_amount,
    format_amount_with_words,
)
from .writer import convert_up_to_999, integer_to_words, to_words

__version__ = "1.0.0"

__all__ = [
    "Amount",
    "AmountWithWords",
    "Currency",
    "InvalidAmount",
    "amount_in_words_or_placeholder",
    "convert_up_to_999",
    "format_amount",
    "format_amount_with_words",
    "integer_to_words",
    "parse_amount",
    "to_words",
]
