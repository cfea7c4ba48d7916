"""Serializers for authentication flows (sign-up, sign-in, public profile)."""

from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class SignUpSerializer(serializers.Serializer):
    """Validate the sign-up payload; uniqueness is checked by AuthService."""

    first_name = serializers.CharField(
        max_length=100,
        error_messages={
            "required": "First name is required",
            "blank": "First name is required",
            "max_length": "First name must be less than 100 characters",
        },
    )
    last_name = serializers.CharField(
        max_length=100,
        error_messages={
            "required": "Last name is required",
            "blank": "Last name is required",
            "max_length": "Last name must be less than 100 characters",
        },
    )
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "invalid": "Invalid email format",
        },
    )
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        error_messages={
            "required": "Password is required",
            "blank": "Password is required",
            "min_length": "Password must be at least 8 characters long",
        },
    )


class SignInSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "blank": "Email is required",
            "invalid": "Invalid email format",
        },
    )
    password = serializers.CharField(
        write_only=True,
        error_messages={"required": "Password is required", "blank": "Password is required"},
    )


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user fields; the password digest is never exposed."""

    class Meta:
        model = User
        fields = ["id", "first_name", "last_name", "email"]
        read_only_fields = fields


class SessionSerializer(serializers.Serializer):
    """Response shape for sign-up and sign-in (used for the OpenAPI schema)."""

    user = UserPublicSerializer()
    accessToken = serializers.CharField()


def public_user(user) -> dict:
    """Return the public profile of ``user`` as a plain dict."""
    return dict(UserPublicSerializer(user).data)


__all__ = [
    "SessionSerializer",
    "SignInSerializer",
    "SignUpSerializer",
    "UserPublicSerializer",
    "public_user",
]
