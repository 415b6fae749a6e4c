"""Catalog app models - Tour."""
from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class TourQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def with_promotion(self):
        return self.select_related('promotion')


class TourManager(models.Manager):
    def get_queryset(self):
        return TourQuerySet(self.model, using=self._db)

    def active(self):
        return self.get_queryset().active()


class Tour(models.Model):
    """Tour du lịch."""

    objects = TourManager()

    title = models.CharField(max_length=255, verbose_name='Tên tour')
    description = models.TextField(blank=True)
    location = models.CharField(max_length=255, verbose_name='Địa điểm')
    duration = models.PositiveIntegerField(default=1, help_text="Số ngày")

    price = models.DecimalField(
        max_digits=12, decimal_places=0,
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Giá mỗi người"
    )
    max_participants = models.PositiveIntegerField(null=True, blank=True)

    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    image = models.URLField(max_length=500, blank=True)

    promotion = models.ForeignKey(
        'marketing.Promotion', on_delete=models.SET_NULL,
        null=True, blank=True, related_name='tours'
    )

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Tour'
        verbose_name_plural = 'Tour'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def discounted_price(self, now=None):
        from apps.marketing.services import DiscountService
        return DiscountService.resolve_unit_price(self.price, self.promotion, now=now)

    def has_capacity_for(self, number_of_people):
        if not self.max_participants:
            return True
        return number_of_people <= self.max_participants
