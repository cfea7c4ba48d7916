"""Authentication endpoints: sign-up and sign-in."""

from typing import Any

from drf_spectacular.utils import extend_schema
from rest_framework import status

from core.response import BaseAPIView, api_response
from .serializers import SessionSerializer, SignInSerializer, SignUpSerializer
from .services import get_auth_service


class SignUpView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(
        summary="Sign up a new user",
        request=SignUpSerializer,
        responses={200: SessionSerializer},
        auth=[],
        tags=["Auth"],
    )
    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Register a user and return their public profile with a token."""
        serializer = SignUpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session = get_auth_service().sign_up(**serializer.validated_data)
        return api_response(session, status=status.HTTP_200_OK)


class SignInView(BaseAPIView):
    permission_classes: list[Any] = []

    @extend_schema(
        summary="Sign in a user",
        request=SignInSerializer,
        responses={200: SessionSerializer},
        auth=[],
        tags=["Auth"],
    )
    # noinspection PyMethodMayBeStatic
    def post(self, request):
        """Authenticate by email and password and issue a bearer token."""
        serializer = SignInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session = get_auth_service().sign_in(**serializer.validated_data)
        return api_response(session)
