"""
Test suite for currency module
"""

import pytest

from tafqeet.currency import Currency


class TestCurrency:
    """Test Currency names and lookup"""

    def test_house_currency(self):
        assert Currency.SAR.code == "SAR"
        assert Currency.SAR.major_name == "ريال سعودي"
        assert Currency.SAR.minor_name == "هللة"

    def test_every_currency_has_names(self):
        for currency in Currency:
            assert currency.code == currency.name
            assert currency.major_name
            assert currency.minor_name
            assert currency.precision in (2, 3)

    def test_precision(self):
        """Dinars split into 1000 fils, riyals into 100 halalas"""
        assert Currency.SAR.precision == 2
        assert Currency.AED.precision == 2
        for currency in (Currency.KWD, Currency.BHD, Currency.OMR, Currency.JOD):
            assert currency.precision == 3

    def test_from_code(self):
        assert Currency.from_code("KWD") is Currency.KWD
        assert Currency.from_code(" aed ") is Currency.AED

    def test_from_code_unknown(self):
        with pytest.raises(ValueError, match="Unsupported currency code 'XYZ'"):
            Currency.from_code("XYZ")

    @pytest.mark.parametrize("code", ["", "   ", None])
    def test_from_code_empty(self, code):
        with pytest.raises(ValueError, match="non-empty"):
            Currency.from_code(code)
