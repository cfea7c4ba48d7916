"""Item lookup demonstrating the cache-aside read path."""

from typing import Any

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema

from core.response import BaseAPIView, api_response
from .services import get_cache_service


def load_item(item_id: str) -> str:
    """Stand-in for the system of record."""
    return f"Item {item_id} from DB"


class ItemView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(
        summary="Get an item by ID through the cache",
        responses={200: OpenApiTypes.STR},
        auth=[],
        tags=["Items"],
    )
    # noinspection PyMethodMayBeStatic
    def get(self, request, item_id: str):
        """Serve from cache when present; otherwise load, cache, and return."""
        value, hit = get_cache_service().get_or_set(
            item_id,
            lambda: load_item(item_id),
            ttl=settings.ITEM_CACHE_TTL,
        )
        if hit:
            return api_response(f"Cached: {value}")
        return api_response(value)


__all__ = ["ItemView", "load_item"]
