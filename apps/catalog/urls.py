from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
# Specific routes must come BEFORE generic detail routes
router.register(r'tours/admin', views.AdminTourViewSet, basename='admin-tour')  # /tours/admin/
router.register(r'tours', views.TourViewSet, basename='tour')  # /tours/, /tours/{id}/, /tours/{id}/quote/

urlpatterns = [
    path('', include(router.urls)),
]
