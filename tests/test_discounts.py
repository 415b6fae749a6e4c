"""Unit tests for promotion activity and discount resolution.

These run without a database: promotions are raw records or unsaved models.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.marketing.models import Promotion
from apps.marketing.services import DiscountService


def resolve(price, promotion, now):
    return DiscountService.resolve_unit_price(price, promotion, now=now)


class TestNoPromotion:

    @pytest.mark.parametrize('price', [0, 1, 2000000, Decimal('999999.5'), 1500000.0])
    def test_absent_promotion_returns_original_price(self, price, now):
        assert resolve(price, None, now) == Decimal(str(price))

    def test_result_is_decimal(self, now):
        assert isinstance(resolve(2000000, None, now), Decimal)


class TestActivity:

    def test_switched_off_promotion_is_ignored(self, promotion_data, now):
        promotion_data.update(active=False, discount_percent=50)
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_switched_off_ignores_every_discount_field(self, promotion_data, now):
        promotion_data.update(active=False, discount_percent=0, discount_amount=300000)
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_before_start_is_inactive(self, promotion_data, now):
        promotion_data.update(discount_percent=20, start_date=now + timedelta(seconds=1))
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_start_date_equal_to_now_is_active(self, promotion_data, now):
        promotion_data.update(discount_percent=20, start_date=now)
        assert resolve(1000000, promotion_data, now) == Decimal('800000')

    def test_end_date_equal_to_now_is_active(self, promotion_data, now):
        promotion_data.update(discount_percent=20, end_date=now)
        assert resolve(1000000, promotion_data, now) == Decimal('800000')

    def test_one_microsecond_after_end_is_inactive(self, promotion_data, now):
        promotion_data.update(discount_percent=20, end_date=now - timedelta(microseconds=1))
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_missing_dates_make_promotion_inactive(self, promotion_data, now):
        promotion_data.update(discount_percent=20, end_date=None)
        assert not DiscountService.is_active(promotion_data, now=now)
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_inverted_window_is_inactive(self, promotion_data, now):
        promotion_data.update(start_date=now + timedelta(days=1), end_date=now - timedelta(days=1))
        assert not DiscountService.is_active(promotion_data, now=now)

    def test_iso_strings_are_accepted(self, promotion_data, now):
        promotion_data.update(
            discount_percent=10,
            start_date=(now - timedelta(days=1)).isoformat(),
            end_date=(now + timedelta(days=1)).isoformat(),
        )
        assert resolve(1000000, promotion_data, now) == Decimal('900000')

    def test_date_only_end_covers_the_whole_day(self, promotion_data, now):
        promotion_data.update(discount_percent=10, end_date=now.date())
        late_evening = now.replace(hour=23, minute=59, second=59)
        assert DiscountService.is_active(promotion_data, now=late_evening)
        assert not DiscountService.is_active(promotion_data, now=late_evening + timedelta(seconds=1))

    def test_date_only_string_end_covers_the_whole_day(self, promotion_data, now):
        promotion_data.update(end_date=now.date().isoformat())
        assert DiscountService.is_active(promotion_data, now=now.replace(hour=23, minute=0))

    def test_garbage_dates_make_promotion_inactive(self, promotion_data, now):
        promotion_data.update(discount_percent=10, start_date='not a date', end_date=12345)
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_naive_now_is_read_in_project_timezone(self, promotion_data, now):
        promotion_data.update(discount_percent=10, end_date=now)
        naive = timezone.make_naive(now, timezone.get_default_timezone())
        assert DiscountService.is_active(promotion_data, now=naive)

    def test_active_flag_from_string(self, promotion_data, now):
        promotion_data.update(active='false', discount_percent=10)
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_default_now_is_current_time(self, promotion_data):
        current = timezone.now()
        promotion_data.update(start_date=current - timedelta(hours=1), end_date=current + timedelta(hours=1))
        assert DiscountService.is_active(promotion_data)

    def test_none_promotion_is_not_active(self, now):
        assert DiscountService.is_active(None, now=now) is False


class TestPercentDiscount:

    @pytest.mark.parametrize('percent', [1, 10, 15, 33, 50, 99, 100])
    def test_percent_without_cap(self, promotion_data, now, percent):
        promotion_data.update(discount_percent=percent)
        price = Decimal('333333')
        expected = price * (1 - Decimal(percent) / 100)
        assert resolve(price, promotion_data, now) == expected

    def test_cap_limits_deduction(self, promotion_data, now):
        promotion_data.update(discount_percent=50, max_discount_amount=100000)
        assert resolve(1000000, promotion_data, now) == Decimal('900000')

    def test_cap_above_deduction_has_no_effect(self, promotion_data, now):
        promotion_data.update(discount_percent=10, max_discount_amount=500000)
        assert resolve(1000000, promotion_data, now) == Decimal('900000')

    def test_deduction_equal_to_cap_is_not_capped(self, promotion_data, now):
        promotion_data.update(discount_percent=10, max_discount_amount=100000)
        assert resolve(1000000, promotion_data, now) == Decimal('900000')

    def test_zero_cap_is_treated_as_no_cap(self, promotion_data, now):
        promotion_data.update(discount_percent=10, max_discount_amount=0)
        assert resolve(1000000, promotion_data, now) == Decimal('900000')

    def test_percent_wins_over_fixed_amount(self, promotion_data, now):
        promotion_data.update(discount_percent=10, discount_amount=500000)
        assert resolve(1000000, promotion_data, now) == Decimal('900000')

    def test_fractional_result_is_kept(self, promotion_data, now):
        promotion_data.update(discount_percent=15)
        assert resolve(99999, promotion_data, now) == Decimal('84999.15')


class TestFixedDiscount:

    def test_fixed_amount(self, promotion_data, now):
        promotion_data.update(discount_amount=300000)
        assert resolve(1000000, promotion_data, now) == Decimal('700000')

    def test_fixed_amount_used_when_percent_is_zero(self, promotion_data, now):
        promotion_data.update(discount_percent=0, discount_amount=300000)
        assert resolve(1000000, promotion_data, now) == Decimal('700000')

    def test_fixed_amount_never_goes_negative(self, promotion_data, now):
        promotion_data.update(discount_amount=600000)
        assert resolve(500000, promotion_data, now) == Decimal('0')

    def test_fixed_amount_ignores_cap(self, promotion_data, now):
        promotion_data.update(discount_amount=300000, max_discount_amount=100000)
        assert resolve(1000000, promotion_data, now) == Decimal('700000')

    def test_active_without_discount_fields(self, promotion_data, now):
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')


class TestMalformedData:

    @pytest.mark.parametrize('fields', [
        {'discount_percent': -20},
        {'discount_percent': 150},
        {'discount_percent': 'abc'},
        {'discount_percent': float('nan')},
        {'discount_percent': 50, 'max_discount_amount': -100000},
        {'discount_amount': -300000},
        {'discount_amount': 'lots'},
        {'discount_amount': float('inf')},
        {'discount_percent': True},
    ])
    def test_result_stays_within_bounds(self, promotion_data, now, fields):
        promotion_data.update(fields)
        result = resolve(Decimal('1000000'), promotion_data, now)
        assert Decimal('0') <= result <= Decimal('1000000')

    def test_percent_over_hundred_floors_at_zero(self, promotion_data, now):
        promotion_data.update(discount_percent=150)
        assert resolve(1000000, promotion_data, now) == Decimal('0')

    def test_negative_percent_keeps_original(self, promotion_data, now):
        promotion_data.update(discount_percent=-20)
        assert resolve(1000000, promotion_data, now) == Decimal('1000000')

    def test_unusable_original_price_resolves_to_zero(self, promotion_data, now):
        assert resolve(None, promotion_data, now) == Decimal('0')
        assert resolve('n/a', None, now) == Decimal('0')
        assert resolve(-5, None, now) == Decimal('0')

    def test_empty_record(self, now):
        assert resolve(1000000, {}, now) == Decimal('1000000')

    def test_object_without_fields(self, now):
        assert resolve(1000000, object(), now) == Decimal('1000000')


class TestModelInstances:

    def make(self, now, **kwargs):
        defaults = dict(
            code='SUMMER10', title='Summer', active=True,
            start_date=now - timedelta(days=1), end_date=now + timedelta(days=1),
        )
        defaults.update(kwargs)
        return Promotion(**defaults)

    def test_unsaved_model_is_resolved(self, now):
        promotion = self.make(now, discount_percent=Decimal('10.00'))
        assert DiscountService.resolve_unit_price(Decimal('2000000'), promotion, now=now) == Decimal('1800000')

    def test_apply_to_delegates_to_service(self, now):
        promotion = self.make(now, discount_percent=Decimal('50'), max_discount_amount=Decimal('100000'))
        assert promotion.apply_to(1000000, now=now) == Decimal('900000')

    def test_remaining_uses(self, now):
        assert self.make(now, usage_limit=10, used_count=3).remaining_uses == 7
        assert self.make(now, usage_limit=None).remaining_uses is None

    def test_min_order_and_usage_are_not_consulted(self, now):
        promotion = self.make(
            now, discount_percent=Decimal('10'),
            min_order_amount=Decimal('50000000'), usage_limit=1, used_count=5,
        )
        assert promotion.apply_to(1000000, now=now) == Decimal('900000')


class TestPurity:

    def test_same_inputs_same_result(self, promotion_data, now):
        promotion_data.update(discount_percent=25, max_discount_amount=200000)
        first = resolve(1000000, promotion_data, now)
        second = resolve(1000000, promotion_data, now)
        assert first == second == Decimal('800000')

    def test_record_is_not_mutated(self, promotion_data, now):
        promotion_data.update(discount_percent=25)
        snapshot = dict(promotion_data)
        resolve(1000000, promotion_data, now)
        assert promotion_data == snapshot

    def test_date_objects_for_window(self, promotion_data):
        promotion_data.update(start_date=date(2026, 6, 1), end_date=date(2026, 6, 30), discount_percent=10)
        tz = timezone.get_default_timezone()
        assert DiscountService.is_active(promotion_data, now=timezone.make_aware(datetime(2026, 6, 1, 0, 0), tz))
        assert not DiscountService.is_active(promotion_data, now=timezone.make_aware(datetime(2026, 7, 1, 0, 0), tz))
