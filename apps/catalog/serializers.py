from rest_framework import serializers
from apps.marketing.serializers import PromotionMinimalSerializer
from .models import Tour
from .services import TourPricingService


class TourPriceSerializer(serializers.Serializer):
    """Renders TourPricingService.price_pair with money as decimal strings."""
    original_price = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    discounted_price = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    has_promotion = serializers.BooleanField(read_only=True)
    saving = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    original_price_display = serializers.CharField(read_only=True)
    discounted_price_display = serializers.CharField(read_only=True)


class TourListSerializer(serializers.ModelSerializer):
    promotion = PromotionMinimalSerializer(read_only=True)

    price_fields = ('original_price', 'discounted_price', 'has_promotion')

    class Meta:
        model = Tour
        fields = ('id', 'title', 'location', 'duration', 'price', 'max_participants',
                  'start_date', 'end_date', 'image', 'promotion', 'is_active')

    def to_representation(self, instance):
        """
        Adds the price pair. Views put a single 'now' in the context so every
        card of one response is priced against the same instant.
        """
        data = super().to_representation(instance)
        pair = TourPriceSerializer(
            TourPricingService.price_pair(instance, now=self.context.get('now'))
        ).data
        for name in self.price_fields:
            data[name] = pair[name]
        if not pair['has_promotion']:
            data['promotion'] = None
        return data


class TourDetailSerializer(TourListSerializer):
    price_fields = TourListSerializer.price_fields + (
        'saving', 'original_price_display', 'discounted_price_display',
    )

    class Meta(TourListSerializer.Meta):
        fields = TourListSerializer.Meta.fields + ('description', 'created_at')


class TourCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating/updating tours from the back office."""

    class Meta:
        model = Tour
        fields = ('id', 'title', 'description', 'location', 'duration', 'price',
                  'max_participants', 'start_date', 'end_date', 'image', 'promotion', 'is_active')
        read_only_fields = ('id',)

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({'end_date': "Ngày kết thúc phải sau ngày khởi hành"})
        return attrs
