from django.urls import path, include
from rest_framework import routers

from .views import RestaurantTableViewSet

app_name = "tables"

router = routers.DefaultRouter()
router.register(r"tables", RestaurantTableViewSet, basename="table")

urlpatterns = [
    path("", include(router.urls)),
]
