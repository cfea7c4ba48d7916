"""Serializers for article payloads, query parameters, and responses."""

from rest_framework import serializers

from authentication.serializers import UserPublicSerializer
from .models import Article


class ArticleSerializer(serializers.ModelSerializer):
    """Article with its owner's public profile joined in."""

    user_id = serializers.IntegerField(read_only=True)
    user = UserPublicSerializer(read_only=True)

    class Meta:
        """Expose article fields; ownership and timestamps are read-only."""
        model = Article
        fields = ["id", "title", "description", "user_id", "user", "created_at", "updated_at"]
        read_only_fields = fields


class CreateArticleSerializer(serializers.Serializer):
    title = serializers.CharField(
        max_length=255,
        error_messages={"required": "Title is required", "blank": "Title is required"},
    )
    description = serializers.CharField(
        error_messages={"required": "Description is required", "blank": "Description is required"},
    )


class UpdateArticleSerializer(serializers.Serializer):
    """Partial update; blank values are accepted and leave the field unchanged."""

    title = serializers.CharField(
        max_length=255,
        required=False,
        allow_blank=True,
        error_messages={"invalid": "Title must be a string"},
    )
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        error_messages={"invalid": "Description must be a string"},
    )


class ArticleListParamsSerializer(serializers.Serializer):
    """Query parameters for listing; date format is checked by the service."""

    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1, default=10)
    start_date = serializers.CharField(required=False, allow_blank=True, default="")
    end_date = serializers.CharField(required=False, allow_blank=True, default="")
    user_id = serializers.IntegerField(required=False, min_value=0, default=0)


class ArticlePageSerializer(serializers.Serializer):
    """Response shape of the list endpoint (used for the OpenAPI schema)."""

    data = ArticleSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    limit = serializers.IntegerField()


__all__ = [
    "ArticleListParamsSerializer",
    "ArticlePageSerializer",
    "ArticleSerializer",
    "CreateArticleSerializer",
    "UpdateArticleSerializer",
]
