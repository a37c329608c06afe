"""Order URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.orders.views import OrderViewSet

urlpatterns = [
    path("list", OrderViewSet.as_view({"get": "list"}), name="order-list"),
    path("find/<str:pk>", OrderViewSet.as_view({"get": "retrieve"}), name="order-detail"),
    path("create", OrderViewSet.as_view({"post": "create"}), name="order-create"),
]
