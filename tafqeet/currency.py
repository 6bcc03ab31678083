"""
Currency Names Module

ISO 4217 codes with the Arabic names printed for their major and minor
units, and the number of fractional digits the minor unit takes. Saudi
riyal is the house currency.
"""

from enum import Enum


class Currency(Enum):
    """ISO 4217 currency codes with Arabic unit names and precision"""
    SAR = ("SAR", "ريال سعودي", "هللة", 2)  # 100 halalas
    AED = ("AED", "درهم إماراتي", "فلس", 2)  # 100 fils
    KWD = ("KWD", "دينار كويتي", "فلس", 3)  # 1000 fils
    QAR = ("QAR", "ريال قطري", "درهم", 2)
    OMR = ("OMR", "ريال عماني", "بيسة", 3)  # 1000 baisa
    BHD = ("BHD", "دينار بحريني", "فلس", 3)  # 1000 fils
    JOD = ("JOD", "دينار أردني", "فلس", 3)  # 1000 fils
    EGP = ("EGP", "جنيه مصري", "قرش", 2)
    USD = ("USD", "دولار أمريكي", "سنت", 2)
    EUR = ("EUR", "يورو", "سنت", 2)

    def __init__(self, code: str, major_name: str, minor_name: str, precision: int):
        self.code = code
        self.major_name = major_name
        self.minor_name = minor_name
        self.precision = precision

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """
        Look up a currency by ISO code, ignoring case and surrounding whitespace

        Raises:
            ValueError: If the code is not a supported currency
        """
        if not isinstance(code, str) or not code.strip():
            raise ValueError("Currency code must be a non-empty string")

        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise ValueError(f"Unsupported currency code '{code}'") from None
