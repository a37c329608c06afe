"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

urlpatterns = [
    path("list", ProductViewSet.as_view({"get": "list"}), name="product-list"),
    path("find/<str:pk>", ProductViewSet.as_view({"get": "retrieve"}), name="product-detail"),
    path("create", ProductViewSet.as_view({"post": "create"}), name="product-create"),
]
