"""Customer URL configuration.

Routes are declared explicitly: the public paths do not follow the
collection/detail layout a DRF router generates.  Ids are captured as
strings so a non-numeric id reaches the view and is reported as a type
mismatch rather than an unmatched route.
"""

from __future__ import annotations

from django.urls import path

from modules.customers.views import CustomerViewSet

urlpatterns = [
    path("list", CustomerViewSet.as_view({"get": "list"}), name="customer-list"),
    path("list/paged", CustomerViewSet.as_view({"get": "paged"}), name="customer-paged"),
    path("search", CustomerViewSet.as_view({"get": "search"}), name="customer-search"),
    path("find/<str:pk>", CustomerViewSet.as_view({"get": "retrieve"}), name="customer-detail"),
    path("create", CustomerViewSet.as_view({"post": "create"}), name="customer-create"),
]
