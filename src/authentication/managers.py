"""Custom user manager hashing passwords with the keyed hasher."""

from django.contrib.auth.base_user import BaseUserManager

from .hashers import PasswordHasher


class UserManager(BaseUserManager):
    """Manager to create users with deterministic password digests."""

    use_in_migrations = True

    def create_user(
        self,
        email: str,
        password: str | None = None,
        hasher: PasswordHasher | None = None,
        **extra_fields,
    ):
        """Create a regular user, hashing ``password`` with ``hasher``.

        The email is stored exactly as given; sign-up and sign-in compare it
        verbatim.
        """
        if not email:
            raise ValueError("The Email must be set")
        if password is None:
            raise ValueError("Password must be provided")
        extra_fields.setdefault("role", self.model.Role.USER)
        user = self.model(email=email, **extra_fields)
        user.set_password(password, hasher=hasher)
        user.save(using=self._db)
        return user


__all__ = ["UserManager"]
