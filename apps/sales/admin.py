from django.contrib import admin
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ('booking_number', 'user', 'tour', 'booking_date', 'number_of_people',
                    'total_price', 'promotion_code', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('booking_number', 'tour__title', 'user__email', 'promotion_code')
    readonly_fields = ('booking_number', 'original_price', 'unit_price', 'total_price', 'promotion_code')
