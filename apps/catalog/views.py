from rest_framework import viewsets, permissions, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from rest_framework.exceptions import ValidationError
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend

from .models import Tour
from .serializers import TourListSerializer, TourDetailSerializer, TourCreateSerializer
from .filters import TourFilter


class TourPagination(PageNumberPagination):
    page_size = 9
    page_size_query_param = 'page_size'
    max_page_size = 100


class TourViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for public tour listing, details and live booking quotes.
    """
    serializer_class = TourListSerializer
    pagination_class = TourPagination
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = TourFilter
    search_fields = ['title', 'location', 'description']
    ordering_fields = ['price', 'start_date', 'created_at']

    def get_queryset(self):
        queryset = Tour.objects.all() if self.request.user.is_staff else Tour.objects.active()
        return queryset.with_promotion()

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return TourDetailSerializer
        return TourListSerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['now'] = timezone.now()
        return context

    @action(detail=True, methods=['get'])
    def quote(self, request, pk=None):
        """
        Per-person price and total for ?number_of_people=N.
        Called on every change of the participant count on the booking page.
        """
        from apps.sales.serializers import BookingQuoteSerializer, BookingQuoteResultSerializer
        from apps.sales.services import BookingService

        tour = self.get_object()
        params = BookingQuoteSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        try:
            quote = BookingService.quote(tour, params.validated_data['number_of_people'])
        except ValidationError as e:
            return Response(e.detail, status=status.HTTP_400_BAD_REQUEST)
        return Response(BookingQuoteResultSerializer(quote).data)


class AdminTourViewSet(viewsets.ModelViewSet):
    """
    Admin ViewSet for full CRUD operations on Tours.
    """
    permission_classes = [permissions.IsAdminUser]
    queryset = Tour.objects.all().select_related('promotion').order_by('-created_at')
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_class = TourFilter
    search_fields = ['title', 'location']

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return TourCreateSerializer
        return TourDetailSerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['now'] = timezone.now()
        return context
