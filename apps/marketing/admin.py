from django.contrib import admin
from .models import Promotion


@admin.register(Promotion)
class PromotionAdmin(admin.ModelAdmin):
    list_display = ('code', 'title', 'discount_percent', 'discount_amount', 'is_effective',
                    'used_count', 'start_date', 'end_date', 'active')
    list_filter = ('active',)
    search_fields = ('code', 'title')
    list_editable = ('active',)
