"""Custom User model identified by email with keyed password digests."""

from typing import ClassVar, Optional

from django.contrib.auth.models import AbstractBaseUser
from django.db import models

from .hashers import PasswordHasher, get_password_hasher
from .managers import UserManager


class User(AbstractBaseUser):
    """Account that owns articles; created on sign-up and never mutated here.

    ``AbstractBaseUser`` keeps the model usable as ``AUTH_USER_MODEL``; its
    ``password`` and ``last_login`` columns are dropped because credentials
    live in ``password_hash``.
    """

    class Role(models.TextChoices):
        USER = "user", "User"
        ADMIN = "admin", "Admin"

    password = None
    last_login = None

    first_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100, blank=True, default="")
    email = models.EmailField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=64)
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.USER)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: ClassVar[list[str]] = []

    objects = UserManager()

    class Meta:
        """Default ordering shows newest users first."""
        db_table = "user"
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.email

    def set_password(  # type: ignore[override]
        self, raw_password: str, hasher: Optional[PasswordHasher] = None
    ) -> None:
        """Store the keyed digest of ``raw_password`` in ``password_hash``."""

        self.password_hash = (hasher or get_password_hasher()).hash(raw_password)


__all__ = ["User"]
