from rest_framework import serializers
from apps.catalog.models import Tour
from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    tour_id = serializers.IntegerField(source='tour.id', read_only=True)
    tour_title = serializers.CharField(source='tour.title', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    discount_total = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)

    class Meta:
        model = Booking
        fields = ('booking_number', 'user_id', 'tour_id', 'tour_title', 'booking_date',
                  'status', 'status_display', 'number_of_people',
                  'original_price', 'unit_price', 'total_price', 'discount_total',
                  'promotion_code', 'created_at')
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """
    Input for a new booking. Range checks on number_of_people happen in
    BookingService so the quote and create paths share one set of messages.
    """
    tour_id = serializers.PrimaryKeyRelatedField(
        queryset=Tour.objects.active(), source='tour',
        error_messages={'does_not_exist': 'Không tìm thấy tour'}
    )
    booking_date = serializers.DateField(
        required=False, allow_null=True,
        error_messages={'invalid': 'Ngày khởi hành không hợp lệ'}
    )
    number_of_people = serializers.IntegerField(
        error_messages={
            'required': 'Vui lòng nhập số lượng người tham gia',
            'invalid': 'Số lượng người tham gia không hợp lệ',
        }
    )


class BookingQuoteSerializer(serializers.Serializer):
    number_of_people = serializers.IntegerField(
        error_messages={
            'required': 'Vui lòng nhập số lượng người tham gia',
            'invalid': 'Số lượng người tham gia không hợp lệ',
        }
    )


class BookingQuoteResultSerializer(serializers.Serializer):
    """Output of BookingService.quote."""
    tour_id = serializers.IntegerField(read_only=True)
    number_of_people = serializers.IntegerField(read_only=True)
    original_price = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    unit_price = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_price = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)
    promotion_code = serializers.CharField(read_only=True, allow_null=True)
    unit_price_display = serializers.CharField(read_only=True)
    total_price_display = serializers.CharField(read_only=True)


class PaymentRequestSerializer(serializers.Serializer):
    """Hand-off block for the payment step."""
    order_id = serializers.CharField(read_only=True)
    amount = serializers.DecimalField(max_digits=16, decimal_places=2, read_only=True)
    description = serializers.CharField(read_only=True)
    methods = serializers.ListField(child=serializers.CharField(), read_only=True)
