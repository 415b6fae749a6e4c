from decimal import Decimal

import pytest

from apps.utils.money import NO_PRICE_LABEL, format_vnd, to_decimal


class TestToDecimal:

    @pytest.mark.parametrize('raw, expected', [
        (1800000, Decimal('1800000')),
        ('2000000', Decimal('2000000')),
        (' 15.5 ', Decimal('15.5')),
        (0.1, Decimal('0.1')),
        (Decimal('12.34'), Decimal('12.34')),
    ])
    def test_parses_amounts(self, raw, expected):
        assert to_decimal(raw) == expected

    @pytest.mark.parametrize('raw', [None, True, False, '', 'abc', 'nan', 'inf', float('nan'), [], object()])
    def test_rejects_unusable_input(self, raw):
        assert to_decimal(raw) is None


class TestFormatVnd:

    def test_thousands_are_dot_separated(self):
        assert format_vnd(1800000) == '1.800.000 ₫'

    def test_small_amount(self):
        assert format_vnd(500) == '500 ₫'

    def test_zero(self):
        assert format_vnd(0) == '0 ₫'

    def test_rounds_half_up_to_whole_dong(self):
        assert format_vnd(Decimal('84999.5')) == '85.000 ₫'
        assert format_vnd(Decimal('84999.49')) == '84.999 ₫'

    def test_missing_price(self):
        assert format_vnd(None) == NO_PRICE_LABEL
        assert format_vnd('not a price') == NO_PRICE_LABEL
