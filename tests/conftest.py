"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant for pricing tests."""
    return timezone.make_aware(datetime(2026, 6, 15, 10, 30), timezone.get_default_timezone())


@pytest.fixture
def promotion_data(now):
    """Raw promotion record, active around `now`, with no discount set."""
    return {
        'code': 'SUMMER10',
        'title': 'Summer sale',
        'active': True,
        'start_date': now - timedelta(days=10),
        'end_date': now + timedelta(days=10),
        'discount_percent': None,
        'discount_amount': None,
        'max_discount_amount': None,
    }


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username='traveller', email='traveller@example.com', password='Secret!234'
    )


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username='staff', email='staff@example.com', password='Secret!234', is_staff=True
    )


@pytest.fixture
def auth_client(api_client, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def promotion(db):
    from apps.marketing.models import Promotion

    current = timezone.now()
    return Promotion.objects.create(
        code='summer10',
        title='Summer sale',
        discount_percent=Decimal('10'),
        start_date=current - timedelta(days=1),
        end_date=current + timedelta(days=30),
        active=True,
    )


@pytest.fixture
def tour(db, promotion):
    from apps.catalog.models import Tour

    return Tour.objects.create(
        title='Hạ Long 3 ngày 2 đêm',
        location='Quảng Ninh',
        duration=3,
        price=Decimal('2000000'),
        max_participants=10,
        start_date=date(2026, 12, 1),
        end_date=date(2026, 12, 3),
        promotion=promotion,
    )


@pytest.fixture
def plain_tour(db):
    from apps.catalog.models import Tour

    return Tour.objects.create(
        title='Đà Lạt 2 ngày',
        location='Lâm Đồng',
        duration=2,
        price=Decimal('1500000'),
        max_participants=None,
    )
