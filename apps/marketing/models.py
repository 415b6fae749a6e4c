"""Marketing app models - Promotions."""
from decimal import Decimal
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator


class Promotion(models.Model):
    """Chương trình khuyến mãi."""

    code = models.CharField(max_length=50, verbose_name='Mã khuyến mãi')
    title = models.CharField(max_length=255, verbose_name='Tiêu đề')
    description = models.TextField(blank=True)
    image = models.URLField(max_length=500, blank=True, null=True)

    discount_percent = models.DecimalField(
        max_digits=5, decimal_places=2, default=0,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )
    discount_amount = models.DecimalField(
        max_digits=12, decimal_places=0, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    max_discount_amount = models.DecimalField(
        max_digits=12, decimal_places=0, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Display only, not enforced when pricing
    min_order_amount = models.DecimalField(max_digits=12, decimal_places=0, null=True, blank=True)
    usage_limit = models.PositiveIntegerField(null=True, blank=True)
    used_count = models.PositiveIntegerField(default=0)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Khuyến mãi'
        verbose_name_plural = 'Khuyến mãi'
        ordering = ['-start_date']

    def __str__(self):
        return f"{self.code} - {self.title}"

    def save(self, *args, **kwargs):
        if self.code:
            self.code = self.code.strip().upper()
        super().save(*args, **kwargs)

    @property
    def is_effective(self):
        from .services import DiscountService
        return DiscountService.is_active(self)

    @property
    def remaining_uses(self):
        if self.usage_limit is None:
            return None
        return max(0, self.usage_limit - self.used_count)

    def apply_to(self, price, now=None):
        from .services import DiscountService
        return DiscountService.resolve_unit_price(price, self, now=now)
