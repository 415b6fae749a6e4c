"""Sales app models - Booking."""
import uuid
import time
from django.db import models
from django.conf import settings
from apps.catalog.models import Tour


class Booking(models.Model):
    """Đơn đặt tour."""

    STATUS_CHOICES = [
        ('PENDING', 'Chờ xác nhận'),
        ('CONFIRMED', 'Đã xác nhận'),
        ('CANCELLED', 'Đã hủy'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='bookings'
    )
    tour = models.ForeignKey(Tour, on_delete=models.PROTECT, related_name='bookings')
    booking_number = models.CharField(max_length=20, unique=True, editable=False)
    booking_date = models.DateField(help_text="Ngày khởi hành")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='PENDING')
    number_of_people = models.PositiveIntegerField()

    # Pricing snapshot taken at creation, never recomputed
    original_price = models.DecimalField(max_digits=14, decimal_places=2)
    unit_price = models.DecimalField(max_digits=14, decimal_places=2)
    total_price = models.DecimalField(max_digits=16, decimal_places=2)
    promotion_code = models.CharField(max_length=50, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'Đơn đặt tour'
        verbose_name_plural = 'Đơn đặt tour'
        ordering = ['-created_at']

    def __str__(self):
        return f"Đơn đặt tour #{self.booking_number}"

    def save(self, *args, **kwargs):
        if not self.booking_number:
            self.booking_number = self.generate_booking_number()
        super().save(*args, **kwargs)

    @staticmethod
    def generate_booking_number():
        timestamp = str(int(time.time()))[-8:]
        unique_id = str(uuid.uuid4().int)[:4]
        return f"BK{timestamp}{unique_id}"

    @property
    def discount_total(self):
        return (self.original_price - self.unit_price) * self.number_of_people

    def can_cancel(self):
        return self.status in ['PENDING', 'CONFIRMED']
