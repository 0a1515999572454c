"""Customer URL configuration.

Mounted under ``api/v1/``.  The detail route accepts the ID with or
without a trailing slash (``customers/1`` and ``customers/1/``).
"""

from __future__ import annotations

from django.urls import path, re_path

from modules.customers.views import CustomerViewSet

customer_list = CustomerViewSet.as_view({"get": "list", "post": "create"})
customer_detail = CustomerViewSet.as_view({"put": "update", "delete": "destroy"})

urlpatterns = [
    path("customers/", customer_list, name="customer-list"),
    re_path(r"^customers/(?P<pk>\d+)/?$", customer_detail, name="customer-detail"),
]
