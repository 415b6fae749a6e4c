import django_filters
from .models import Tour


class TourFilter(django_filters.FilterSet):
    title = django_filters.CharFilter(field_name='title', lookup_expr='icontains')
    location = django_filters.CharFilter(field_name='location', lookup_expr='icontains')
    # Price range is on the base price, before promotions
    min_price = django_filters.NumberFilter(field_name='price', lookup_expr='gte')
    max_price = django_filters.NumberFilter(field_name='price', lookup_expr='lte')
    has_promotion = django_filters.BooleanFilter(method='filter_has_promotion')

    class Meta:
        model = Tour
        fields = ['title', 'location', 'is_active']

    def filter_has_promotion(self, queryset, name, value):
        if value is None:
            return queryset
        return queryset.filter(promotion__isnull=not value)
