"""Article endpoints; mutations go through the bearer-token gate first."""

from typing import Any

from drf_spectacular.utils import extend_schema
from rest_framework import status

from core.authentication import authenticate_request
from core.response import BaseAPIView, api_response, no_content
from .serializers import (
    ArticleListParamsSerializer,
    ArticlePageSerializer,
    ArticleSerializer,
    CreateArticleSerializer,
    UpdateArticleSerializer,
)
from .services import get_article_service


class ArticleListView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(
        summary="Get all articles",
        parameters=[ArticleListParamsSerializer],
        responses={200: ArticlePageSerializer},
        auth=[],
        tags=["Articles"],
    )
    # noinspection PyMethodMayBeStatic
    def get(self, request):
        """List articles filtered by date range and owner, paginated."""
        params = ArticleListParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        page = get_article_service().list(**params.validated_data)
        page["data"] = ArticleSerializer(page["data"], many=True).data
        return api_response(page)

    @extend_schema(
        summary="Create a new article",
        request=CreateArticleSerializer,
        responses={201: ArticleSerializer},
        tags=["Articles"],
        auth=[{"bearerAuth": []}],
    )
    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Create an article owned by the authenticated user."""
        principal = authenticate_request(request)
        serializer = CreateArticleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        article = get_article_service().create(serializer.validated_data, principal.user_id)
        return api_response(ArticleSerializer(article).data, status=status.HTTP_201_CREATED)


class ArticleDetailView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(
        summary="Get article by ID",
        responses={200: ArticleSerializer},
        auth=[],
        tags=["Articles"],
    )
    # noinspection PyMethodMayBeStatic
    def get(self, request, pk: int):
        """Return one article with its owner's public profile."""
        article = get_article_service().find_one(pk)
        return api_response(ArticleSerializer(article).data)

    @extend_schema(
        summary="Update an article",
        request=UpdateArticleSerializer,
        responses={200: ArticleSerializer},
        tags=["Articles"],
        auth=[{"bearerAuth": []}],
    )
    # noinspection PyMethodMayBeStatic
    def patch(self, request, pk: int):
        """Update title/description; only the owner may do this."""
        principal = authenticate_request(request)
        serializer = UpdateArticleSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        article = get_article_service().update(pk, serializer.validated_data, principal.user_id)
        return api_response(ArticleSerializer(article).data)

    @extend_schema(
        summary="Delete an article",
        responses={204: None},
        tags=["Articles"],
        auth=[{"bearerAuth": []}],
    )
    # noinspection PyMethodMayBeStatic
    def delete(self, request, pk: int):
        """Delete an article owned by the caller and return 204."""
        principal = authenticate_request(request)
        get_article_service().remove(pk, principal.user_id)
        return no_content()


__all__ = ["ArticleDetailView", "ArticleListView"]
