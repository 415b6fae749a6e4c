from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'marketing'

router = DefaultRouter()
# Admin routes must come BEFORE the public detail route
router.register(r'promotions/admin', views.AdminPromotionViewSet, basename='admin-promotion')
router.register(r'promotions', views.PromotionViewSet, basename='promotion')

urlpatterns = [
    path('', include(router.urls)),
]
