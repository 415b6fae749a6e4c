"""Catalog services - price display for tour cards and detail pages."""
from typing import Dict, Any
from apps.marketing.services import DiscountService
from apps.utils.money import format_vnd


class TourPricingService:
    """Builds the 'original vs. discounted' price pair for a tour."""

    @staticmethod
    def price_pair(tour, now=None) -> Dict[str, Any]:
        now = DiscountService.reference_now(now)
        original = DiscountService.resolve_unit_price(tour.price, None)
        discounted = DiscountService.resolve_unit_price(tour.price, tour.promotion, now=now)
        has_promotion = discounted < original

        return {
            'original_price': original,
            'discounted_price': discounted,
            'has_promotion': has_promotion,
            'saving': original - discounted,
            'original_price_display': format_vnd(original),
            'discounted_price_display': format_vnd(discounted),
        }
