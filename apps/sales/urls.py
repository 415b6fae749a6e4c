from django.urls import path
from . import views

app_name = 'sales'

urlpatterns = [
    # Bookings
    path('bookings/', views.BookingListCreateView.as_view(), name='booking_list'),
    path('bookings/<str:booking_number>/', views.BookingDetailView.as_view(), name='booking_detail'),
    path('bookings/<str:booking_number>/cancel/', views.BookingCancelView.as_view(), name='booking_cancel'),

    # Admin
    path('admin/bookings/', views.AdminBookingListView.as_view(), name='admin_booking_list'),
    path('admin/bookings/export/', views.AdminBookingExportView.as_view(), name='admin_booking_export'),
    path('admin/bookings/<str:booking_number>/status/', views.AdminBookingStatusUpdateView.as_view(), name='admin_booking_status'),
]
