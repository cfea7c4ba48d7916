"""Routing for the cached item endpoint."""

from django.urls import path

from .views import ItemView

urlpatterns = [
    path("items/<str:item_id>/", ItemView.as_view(), name="item-detail"),
]
