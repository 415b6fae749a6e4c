"""Marketing services - promotion activity and discount resolution.

Pricing here is a pure function of its inputs and a reference instant:
no queries, no writes. Promotion data coming from the database, the admin
or a raw API record may be incomplete or inconsistent, so every field is
read defensively and the resolved price always stays in [0, original].
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Mapping, Optional

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.utils.money import to_decimal

logger = logging.getLogger('apps.marketing')

ZERO = Decimal('0')
HUNDRED = Decimal('100')

TRUE_STRINGS = ('true', '1', 'yes', 'on')


def _read(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def _to_datetime(value: Any, end_of_day: bool = False) -> Optional[datetime]:
    """
    Normalize a window bound to an aware datetime.
    A bare date covers the whole day; unparsable input gives None.
    """
    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip()
        try:
            # Date-only strings first, parse_datetime would read them as midnight
            value = parse_date(text) or parse_datetime(text)
        except ValueError:
            return None
        if value is None:
            return None

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.max if end_of_day else time.min)
    else:
        return None

    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment, timezone.get_default_timezone())
    return moment


@dataclass(frozen=True)
class PromotionTerms:
    """Normalized snapshot of the fields the resolver reads."""

    active: bool
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    discount_percent: Optional[Decimal]
    discount_amount: Optional[Decimal]
    max_discount_amount: Optional[Decimal]

    @classmethod
    def from_source(cls, source: Any) -> 'PromotionTerms':
        """Build from a Promotion instance, a look-alike object or a snake_case mapping."""
        return cls(
            active=_to_bool(_read(source, 'active')),
            start_date=_to_datetime(_read(source, 'start_date')),
            end_date=_to_datetime(_read(source, 'end_date'), end_of_day=True),
            discount_percent=to_decimal(_read(source, 'discount_percent')),
            discount_amount=to_decimal(_read(source, 'discount_amount')),
            max_discount_amount=to_decimal(_read(source, 'max_discount_amount')),
        )

    def is_active_at(self, now: datetime) -> bool:
        if not self.active or self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= now <= self.end_date


class DiscountService:
    """Resolve per-person prices against an optional promotion."""

    @staticmethod
    def reference_now(now: Optional[datetime] = None) -> datetime:
        if now is None:
            return timezone.now()
        if timezone.is_naive(now):
            return timezone.make_aware(now, timezone.get_default_timezone())
        return now

    @staticmethod
    def is_active(promotion: Any, now: Optional[datetime] = None) -> bool:
        """A promotion is active when switched on and `now` lies inside [start, end]."""
        if promotion is None:
            return False
        terms = PromotionTerms.from_source(promotion)
        return terms.is_active_at(DiscountService.reference_now(now))

    @staticmethod
    def resolve_unit_price(original_price: Any, promotion: Any = None,
                           now: Optional[datetime] = None) -> Decimal:
        """
        Return the discounted unit price for `original_price`.

        Percent discounts take precedence over fixed amounts; when both are
        set the fixed amount is ignored. `max_discount_amount` caps only the
        percent deduction. The result is clamped to [0, original_price].
        """
        price = to_decimal(original_price)
        if price is None or price < ZERO:
            logger.warning(f"Unusable original price {original_price!r}, resolving to 0")
            return ZERO

        if promotion is None:
            return price

        terms = PromotionTerms.from_source(promotion)
        if not terms.is_active_at(DiscountService.reference_now(now)):
            return price

        if terms.discount_percent:
            raw_discount = price * terms.discount_percent / HUNDRED
            discounted = price - raw_discount
            if terms.max_discount_amount and raw_discount > terms.max_discount_amount:
                discounted = price - terms.max_discount_amount
            return DiscountService._clamp(discounted, price)

        if terms.discount_amount:
            return DiscountService._clamp(price - terms.discount_amount, price)

        return price

    @staticmethod
    def _clamp(value: Decimal, ceiling: Decimal) -> Decimal:
        return max(ZERO, min(value, ceiling))
