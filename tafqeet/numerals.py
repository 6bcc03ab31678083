"""
Arabic Number Word Tables

Static lookup tables used to spell out amounts. Indexes match the digit
they name; index 0 is empty wherever the digit contributes no word.
"""

from typing import Tuple

ZERO = "صفر"
NEGATIVE = "سالب"
AND = "و"

ONES: Tuple[str, ...] = (
    "", "واحد", "اثنان", "ثلاثة", "أربعة",
    "خمسة", "ستة", "سبعة", "ثمانية", "تسعة",
)

# 10-19 are irregular and never composed from ONES + TENS
TEENS: Tuple[str, ...] = (
    "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
    "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
)

TENS: Tuple[str, ...] = (
    "", "عشرة", "عشرون", "ثلاثون", "أربعون",
    "خمسون", "ستون", "سبعون", "ثمانون", "تسعون",
)

HUNDREDS: Tuple[str, ...] = (
    "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة",
    "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
)

THOUSAND = "ألف"
TWO_THOUSAND = "ألفان"

# 3-10 thousand take the plural noun, not THOUSAND
THOUSANDS_PLURAL: Tuple[str, ...] = (
    "", "", "",
    "ثلاثة آلاف", "أربعة آلاف", "خمسة آلاف", "ستة آلاف",
    "سبعة آلاف", "ثمانية آلاف", "تسعة آلاف", "عشرة آلاف",
)

MILLION = "مليون"
TWO_MILLION = "مليونان"

MILLIONS_PLURAL: Tuple[str, ...] = (
    "", "", "",
    "ثلاثة ملايين", "أربعة ملايين", "خمسة ملايين", "ستة ملايين",
    "سبعة ملايين", "ثمانية ملايين", "تسعة ملايين", "عشرة ملايين",
)

DEFAULT_CURRENCY_NAME = "ريال سعودي"
DEFAULT_MINOR_UNIT_NAME = "هللة"
CLOSING_PHRASE = "لا غير"
