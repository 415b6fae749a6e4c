from django.contrib import admin
from .models import Tour


@admin.register(Tour)
class TourAdmin(admin.ModelAdmin):
    list_display = ('title', 'location', 'price', 'max_participants', 'start_date', 'promotion', 'is_active')
    list_filter = ('is_active', 'location')
    search_fields = ('title', 'location')
    autocomplete_fields = ('promotion',)
