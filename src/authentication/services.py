"""Token signing/verification and the sign-up / sign-in flows."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from django.contrib.auth import get_user_model

from core.exceptions import BadRequest, Conflict, TokenRejected
from .hashers import PasswordHasher, get_password_hasher
from .serializers import public_user

logger = logging.getLogger(__name__)

User = get_user_model()


class TokenService:
    """Issue and verify signed bearer tokens (HS256 JWTs)."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str, expires_in: int):
        self._secret = secret
        self._ttl = timedelta(seconds=expires_in)

    def sign(self, claims: dict[str, Any]) -> str:
        """Return a token carrying ``claims`` plus ``iat``/``exp``."""

        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode and validate a token; raise TokenRejected on any failure."""

        try:
            return jwt.decode(token, self._secret, algorithms=[self.ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise TokenRejected("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenRejected("Invalid token") from exc


def get_token_service() -> TokenService:
    """Build a TokenService from ``JWT_SECRET`` / ``JWT_EXPIRES_IN``."""
    return TokenService(settings.JWT_SECRET, settings.JWT_EXPIRES_IN)


class AuthService:
    """Register and authenticate users, returning the public profile and a token."""

    def __init__(self, hasher: PasswordHasher, tokens: TokenService):
        self.hasher = hasher
        self.tokens = tokens

    def sign_up(self, first_name: str, last_name: str, email: str, password: str) -> dict[str, Any]:
        """Create a user unless the email is taken."""

        if User.objects.filter(email=email).exists():
            logger.info("Sign-up rejected: email already in use")
            raise Conflict("Email is already in use")

        user = User.objects.create_user(
            email,
            password,
            hasher=self.hasher,
            first_name=first_name,
            last_name=last_name,
        )
        logger.info("User %s signed up", user.pk)
        return self._session(user)

    def sign_in(self, email: str, password: str) -> dict[str, Any]:
        """Authenticate with one lookup on email and password digest.

        An unknown email and a wrong password produce the same error.
        """

        user = User.objects.filter(email=email, password_hash=self.hasher.hash(password)).first()
        if user is None:
            logger.info("Sign-in failed")
            raise BadRequest("Invalid Email or Password")

        logger.info("User %s signed in", user.pk)
        return self._session(user)

    def _session(self, user) -> dict[str, Any]:
        return {
            "user": public_user(user),
            "accessToken": self.tokens.sign({"id": user.pk}),
        }


def get_auth_service() -> AuthService:
    """Compose the default AuthService from settings."""
    return AuthService(get_password_hasher(), get_token_service())


__all__ = ["AuthService", "TokenService", "get_auth_service", "get_token_service"]
