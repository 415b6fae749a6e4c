from rest_framework import viewsets, permissions, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django.utils import timezone
from .models import Promotion
from .serializers import PromotionSerializer, PromotionAdminSerializer
from .services import DiscountService


class PromotionViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Public promotion listing.
    """
    queryset = Promotion.objects.all()
    serializer_class = PromotionSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = None

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['now'] = timezone.now()
        return context

    @action(detail=False, methods=['get'])
    def active(self, request):
        """Promotions switched on and inside their date window right now."""
        now = timezone.now()
        candidates = Promotion.objects.filter(active=True, start_date__lte=now, end_date__gte=now)
        promotions = [p for p in candidates if DiscountService.is_active(p, now=now)]
        serializer = self.get_serializer(promotions, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'], url_path='status')
    def by_status(self, request):
        """Filter by the administrative switch only (?active=true|false)."""
        flag = request.query_params.get('active', 'true').lower() in ('true', '1')
        serializer = self.get_serializer(self.get_queryset().filter(active=flag), many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'], url_path=r'code/(?P<code>[^/.]+)')
    def by_code(self, request, code=None):
        promotion = Promotion.objects.filter(code=code.strip().upper()).order_by('-start_date').first()
        if not promotion:
            return Response({'error': 'Mã khuyến mãi không hợp lệ'}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(promotion).data)


class AdminPromotionViewSet(viewsets.ModelViewSet):
    """
    Admin ViewSet for full CRUD operations on Promotions.
    """
    permission_classes = [permissions.IsAdminUser]
    queryset = Promotion.objects.all().order_by('-created_at')
    serializer_class = PromotionAdminSerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['code', 'title']
    ordering_fields = ['start_date', 'end_date', 'created_at']
