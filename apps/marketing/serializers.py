from datetime import datetime, time
from rest_framework import serializers
from django.utils import timezone
from .models import Promotion
from .services import DiscountService


class PromotionSerializer(serializers.ModelSerializer):
    is_effective = serializers.SerializerMethodField()
    remaining_uses = serializers.ReadOnlyField()

    class Meta:
        model = Promotion
        fields = ('id', 'code', 'title', 'description', 'image',
                  'discount_percent', 'discount_amount', 'max_discount_amount',
                  'min_order_amount', 'usage_limit', 'used_count', 'remaining_uses',
                  'start_date', 'end_date', 'active', 'is_effective')

    def get_is_effective(self, obj):
        return DiscountService.is_active(obj, now=self.context.get('now'))


class PromotionMinimalSerializer(serializers.ModelSerializer):
    """Compact block shown on tour cards."""
    class Meta:
        model = Promotion
        fields = ('id', 'code', 'title', 'discount_percent', 'discount_amount',
                  'max_discount_amount', 'end_date')


class FlexibleDateTimeField(serializers.DateTimeField):
    """Accepts a full datetime or a bare date (the admin form sends dates)."""

    def __init__(self, *args, end_of_day=False, **kwargs):
        self.end_of_day = end_of_day
        super().__init__(*args, **kwargs)

    def to_internal_value(self, value):
        if isinstance(value, str) and len(value.strip()) == 10:
            day = serializers.DateField().to_internal_value(value.strip())
            moment = datetime.combine(day, time.max if self.end_of_day else time.min)
            return timezone.make_aware(moment, timezone.get_default_timezone())
        return super().to_internal_value(value)


class PromotionAdminSerializer(serializers.ModelSerializer):
    """Serializer for creating/updating promotions from the back office."""
    start_date = FlexibleDateTimeField()
    end_date = FlexibleDateTimeField(end_of_day=True)

    class Meta:
        model = Promotion
        fields = ('id', 'code', 'title', 'description', 'image',
                  'discount_percent', 'discount_amount', 'max_discount_amount',
                  'min_order_amount', 'usage_limit', 'used_count',
                  'start_date', 'end_date', 'active')
        read_only_fields = ('id', 'used_count')

    def validate_code(self, value):
        code = value.strip().upper()
        if not code:
            raise serializers.ValidationError("Mã khuyến mãi không được để trống")
        return code

    def validate_min_order_amount(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Giá trị đơn hàng tối thiểu không được âm")
        return value

    def validate(self, attrs):
        start = attrs.get('start_date', getattr(self.instance, 'start_date', None))
        end = attrs.get('end_date', getattr(self.instance, 'end_date', None))
        if start and end and end < start:
            raise serializers.ValidationError({'end_date': "Ngày kết thúc phải sau ngày bắt đầu"})
        return attrs
