import logging
from rest_framework import generics, status, permissions
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.exceptions import ValidationError
from django.db.models import Q
from django.shortcuts import get_object_or_404
from .models import Booking
from .serializers import BookingSerializer, BookingCreateSerializer, PaymentRequestSerializer
from .services import BookingService, BookingExportService

logger = logging.getLogger('apps.sales')


# ============ BOOKING VIEWS ============

class BookingListCreateView(generics.ListAPIView):
    """List own bookings (GET) or create a booking (POST)."""
    serializer_class = BookingSerializer
    permission_classes = (permissions.IsAuthenticated,)

    def get_queryset(self):
        return Booking.objects.filter(user=self.request.user).select_related('tour')

    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        if not serializer.is_valid():
            logger.error(f"Booking serializer errors: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            booking = BookingService.create_booking(
                user=request.user,
                tour=data['tour'],
                booking_data=data,
            )
        except ValidationError as e:
            logger.warning(f"Booking validation error: {e.detail}")
            return Response(e.detail, status=status.HTTP_400_BAD_REQUEST)
        except Exception as e:
            # Security: don't expose internal error details
            logger.exception(f"Booking error for user {request.user.id}: {e}")
            return Response({'error': 'Có lỗi xảy ra khi đặt tour. Vui lòng thử lại.'},
                            status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        response_data = BookingSerializer(booking).data
        response_data['payment'] = PaymentRequestSerializer(BookingService.build_payment_request(booking)).data
        return Response(response_data, status=status.HTTP_201_CREATED)


class BookingDetailView(generics.RetrieveAPIView):
    """Get booking details."""
    serializer_class = BookingSerializer
    permission_classes = (permissions.IsAuthenticated,)
    lookup_field = 'booking_number'

    def get_queryset(self):
        if self.request.user.is_staff:
            return Booking.objects.all().select_related('tour')
        return Booking.objects.filter(user=self.request.user).select_related('tour')


class BookingCancelView(APIView):
    """Cancel a booking."""
    permission_classes = (permissions.IsAuthenticated,)

    def post(self, request, booking_number):
        booking = get_object_or_404(Booking, booking_number=booking_number, user=request.user)
        reason = request.data.get('reason', 'Customer request')

        success, message = BookingService.cancel_booking(booking, reason)

        if success:
            return Response({
                'message': message,
                'booking': BookingSerializer(booking).data
            })
        return Response({'error': message}, status=status.HTTP_400_BAD_REQUEST)


# ============ ADMIN VIEWS ============

class AdminBookingListView(generics.ListAPIView):
    """Admin: List all bookings with filtering."""
    serializer_class = BookingSerializer
    permission_classes = (permissions.IsAdminUser,)

    def get_queryset(self):
        return Booking.objects.all().select_related('tour', 'user').order_by('-created_at')

    def filter_queryset(self, queryset):
        queryset = super().filter_queryset(queryset)

        status_filter = self.request.query_params.get('status')
        search_term = self.request.query_params.get('search')

        if status_filter:
            queryset = queryset.filter(status=status_filter.upper())

        if search_term:
            queryset = queryset.filter(
                Q(booking_number__icontains=search_term) |
                Q(tour__title__icontains=search_term) |
                Q(promotion_code__icontains=search_term) |
                Q(user__email__icontains=search_term)
            )

        return queryset


class AdminBookingExportView(AdminBookingListView):
    """Admin: Export the (filtered) booking list to Excel."""

    def get(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return BookingExportService.export_to_excel(queryset)


class AdminBookingStatusUpdateView(APIView):
    """Admin: Update booking status."""
    permission_classes = (permissions.IsAdminUser,)

    def post(self, request, booking_number):
        booking = get_object_or_404(Booking, booking_number=booking_number)
        new_status = request.data.get('status')

        if not new_status:
            return Response({'error': 'Status is required'}, status=status.HTTP_400_BAD_REQUEST)

        success, message = BookingService.update_booking_status(booking, str(new_status).upper(), request.user)

        if success:
            return Response({
                'message': message,
                'booking': BookingSerializer(booking).data
            })
        return Response({'error': message}, status=status.HTTP_400_BAD_REQUEST)
