"""Sales services - Booking business logic."""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any, Tuple, Optional
from django.conf import settings
from django.db import transaction
from django.http import HttpResponse
from rest_framework.exceptions import ValidationError

from apps.marketing.services import DiscountService
from apps.utils.excel import ExcelGenerator
from apps.utils.money import to_decimal, format_vnd
from .models import Booking

logger = logging.getLogger('apps.sales')

CENT = Decimal('0.01')


class BookingService:
    """Service xử lý business logic cho Booking."""

    @staticmethod
    def compute_total(unit_price, number_of_people: int) -> Decimal:
        """
        Total payable for a party: unit_price * number_of_people.
        Participant limits are the caller's job (see validate_request).
        """
        price = to_decimal(unit_price)
        if price is None:
            price = Decimal('0')
        return price * number_of_people

    @staticmethod
    def validate_participants(tour, number_of_people) -> None:
        if number_of_people is None or number_of_people < 1:
            raise ValidationError({'number_of_people': 'Số lượng người tham gia phải ít nhất là 1'})

        if not tour.has_capacity_for(number_of_people):
            raise ValidationError({
                'number_of_people': f"Số lượng người tham gia không được vượt quá {tour.max_participants}"
            })

    @staticmethod
    def validate_request(tour, number_of_people, booking_date) -> None:
        """Preconditions checked before a booking is created."""
        if not booking_date:
            raise ValidationError({'booking_date': 'Vui lòng chọn ngày khởi hành'})
        BookingService.validate_participants(tour, number_of_people)

    @staticmethod
    def quote(tour, number_of_people: int, now=None) -> Dict[str, Any]:
        """Price breakdown for the booking page."""
        BookingService.validate_participants(tour, number_of_people)

        now = DiscountService.reference_now(now)
        original = DiscountService.resolve_unit_price(tour.price, None)
        unit_price = DiscountService.resolve_unit_price(tour.price, tour.promotion, now=now)
        total = BookingService.compute_total(unit_price, number_of_people)
        discounted = unit_price < original

        return {
            'tour_id': tour.id,
            'number_of_people': number_of_people,
            'original_price': original,
            'unit_price': unit_price,
            'total_price': total,
            'promotion_code': tour.promotion.code if discounted else None,
            'unit_price_display': format_vnd(unit_price),
            'total_price_display': format_vnd(total),
        }

    @staticmethod
    @transaction.atomic
    def create_booking(user, tour, booking_data: Dict[str, Any], now=None) -> Booking:
        """
        Tạo đơn đặt tour. The total is priced once here and stored as a
        snapshot; later promotion changes never touch it.
        """
        number_of_people = booking_data.get('number_of_people')
        booking_date = booking_data.get('booking_date')

        BookingService.validate_request(tour, number_of_people, booking_date)

        quote = BookingService.quote(tour, number_of_people, now=now)
        # Stored with two decimal places; the total is re-derived from the stored unit price
        unit_price = quote['unit_price'].quantize(CENT, rounding=ROUND_HALF_UP)
        total_price = BookingService.compute_total(unit_price, number_of_people)

        booking = Booking.objects.create(
            user=user,
            tour=tour,
            booking_date=booking_date,
            status='PENDING',
            number_of_people=number_of_people,
            original_price=quote['original_price'],
            unit_price=unit_price,
            total_price=total_price,
            promotion_code=quote['promotion_code'] or '',
        )

        logger.info(
            f"Booking {booking.booking_number} created for user {user.id}: "
            f"tour={tour.id}, people={number_of_people}, total={booking.total_price}"
        )
        return booking

    @staticmethod
    def build_payment_request(booking: Booking) -> Dict[str, Any]:
        """Payload handed to the payment step (VNPay / MoMo / COD)."""
        return {
            'order_id': booking.booking_number,
            'amount': booking.total_price,
            'description': f"Thanh toán tour {booking.tour.title}",
            'methods': list(settings.BOOKING_PAYMENT_METHODS),
        }

    @staticmethod
    def update_booking_status(booking: Booking, new_status: str, admin_user=None) -> Tuple[bool, str]:
        """Update booking status with validation."""
        valid_transitions = {
            'PENDING': ['CONFIRMED', 'CANCELLED'],
            'CONFIRMED': ['CANCELLED'],
            'CANCELLED': [],
        }

        if new_status not in valid_transitions.get(booking.status, []):
            return False, f"Không thể chuyển từ '{booking.get_status_display()}' sang '{new_status}'"

        old_status = booking.status
        booking.status = new_status
        booking.save(update_fields=['status', 'updated_at'])

        admin_id = getattr(admin_user, 'id', None)
        logger.info(f"Booking {booking.booking_number} status changed: {old_status} -> {new_status} (by {admin_id})")
        return True, f"Đã cập nhật trạng thái thành '{booking.get_status_display()}'"

    @staticmethod
    def cancel_booking(booking: Booking, reason: str = '') -> Tuple[bool, str]:
        if not booking.can_cancel():
            return False, "Không thể hủy đơn đặt tour ở trạng thái này"

        booking.status = 'CANCELLED'
        booking.save(update_fields=['status', 'updated_at'])

        logger.info(f"Booking {booking.booking_number} cancelled. Reason: {reason}")
        return True, "Đã hủy đơn đặt tour"


class BookingExportService:
    @staticmethod
    def export_to_excel(queryset, filename: Optional[str] = None):
        generator = ExcelGenerator(title="Bookings")

        columns = [
            {'header': 'Mã đơn', 'field': 'booking_number'},
            {'header': 'Khách hàng', 'field': 'user.email'},
            {'header': 'Tour', 'field': 'tour.title'},
            {'header': 'Ngày khởi hành', 'field': 'booking_date', 'formatter': lambda x: x.isoformat() if x else ''},
            {'header': 'Số người', 'field': 'number_of_people'},
            {'header': 'Giá gốc', 'field': 'original_price', 'formatter': lambda x: float(x) if x else 0},
            {'header': 'Đơn giá', 'field': 'unit_price', 'formatter': lambda x: float(x) if x else 0},
            {'header': 'Tổng tiền', 'field': 'total_price', 'formatter': lambda x: float(x) if x else 0},
            {'header': 'Mã khuyến mãi', 'field': 'promotion_code'},
            {'header': 'Trạng thái', 'field': lambda b: b.get_status_display()},
            {'header': 'Ngày tạo', 'field': 'created_at', 'formatter': lambda x: x.strftime('%Y-%m-%d %H:%M') if x else ''},
        ]

        excel_file = generator.generate(queryset, columns)

        response = HttpResponse(
            excel_file.read(),
            content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )
        response['Content-Disposition'] = f'attachment; filename="{filename or "bookings_export.xlsx"}"'
        return response
