from django.urls import path

from hotels.handlers import HotelDetailView, HotelListView

urlpatterns = [
    path("hotels", HotelListView.as_view(), name="hotel-list"),
    path("hotels/<str:hotel_id>", HotelDetailView.as_view(), name="hotel-detail"),
]
