"""Tests for sign-up and sign-in, both through AuthService and over HTTP."""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from authentication.hashers import PasswordHasher
from authentication.services import AuthService, TokenService, get_token_service
from core.exceptions import BadRequest, Conflict
from tests.utils import create_user

User = get_user_model()


class AuthServiceTests(TestCase):
    """Service-level behavior with explicitly composed collaborators."""

    def setUp(self):
        self.hasher = PasswordHasher("service-secret")
        self.tokens = TokenService("token-secret", expires_in=60)
        self.service = AuthService(self.hasher, self.tokens)

    def test_sign_up_stores_digest_and_issues_token(self):
        session = self.service.sign_up("Ada", "Lovelace", "ada@example.com", "StrongPass123")

        user = User.objects.get(email="ada@example.com")
        self.assertEqual(user.password_hash, self.hasher.hash("StrongPass123"))
        self.assertEqual(user.role, User.Role.USER)
        self.assertEqual(
            session["user"],
            {"id": user.pk, "first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"},
        )
        self.assertEqual(self.tokens.verify(session["accessToken"])["id"], user.pk)

    def test_sign_up_duplicate_email_conflicts(self):
        self.service.sign_up("Ada", "Lovelace", "ada@example.com", "StrongPass123")

        with self.assertRaisesMessage(Conflict, "Email is already in use"):
            self.service.sign_up("Other", "Person", "ada@example.com", "AnotherPass123")
        self.assertEqual(User.objects.filter(email="ada@example.com").count(), 1)

    def test_mixed_case_email_is_stored_as_given(self):
        self.service.sign_up("Ada", "Lovelace", "ada@Example.COM", "StrongPass123")

        self.assertTrue(User.objects.filter(email="ada@Example.COM").exists())
        session = self.service.sign_in("ada@Example.COM", "StrongPass123")
        self.assertEqual(session["user"]["email"], "ada@Example.COM")

        with self.assertRaisesMessage(Conflict, "Email is already in use"):
            self.service.sign_up("Ada", "Again", "ada@Example.COM", "StrongPass123")
        self.assertEqual(User.objects.count(), 1)

    def test_sign_in_success(self):
        self.service.sign_up("Ada", "Lovelace", "ada@example.com", "StrongPass123")

        session = self.service.sign_in("ada@example.com", "StrongPass123")

        self.assertEqual(session["user"]["email"], "ada@example.com")
        self.assertIn("accessToken", session)

    def test_wrong_password_and_unknown_email_look_the_same(self):
        self.service.sign_up("Ada", "Lovelace", "ada@example.com", "StrongPass123")

        with self.assertRaisesMessage(BadRequest, "Invalid Email or Password"):
            self.service.sign_in("ada@example.com", "WrongPass123")
        with self.assertRaisesMessage(BadRequest, "Invalid Email or Password"):
            self.service.sign_in("nobody@example.com", "StrongPass123")


class UserModelTests(TestCase):
    def test_table_name_and_credential_columns(self):
        columns = {field.column for field in User._meta.concrete_fields}

        self.assertEqual(User._meta.db_table, "user")
        self.assertIn("password_hash", columns)
        self.assertNotIn("password", columns)
        self.assertNotIn("last_login", columns)

    def test_set_password_stores_keyed_digest(self):
        hasher = PasswordHasher("model-secret")
        user = User(email="digest@example.com")

        user.set_password("StrongPass123", hasher=hasher)

        self.assertEqual(user.password_hash, hasher.hash("StrongPass123"))


class AuthFlowTests(TestCase):
    """End-to-end tests covering the auth endpoints."""

    @classmethod
    def setUpTestData(cls):
        """Seed a default user for sign-in cases."""
        cls.password = "StrongPass123"
        cls.user = create_user("user@example.com", cls.password, first_name="Jane", last_name="Doe")

    def setUp(self):
        """Fresh DRF APIClient per test."""
        self.api_client: APIClient = APIClient()

    def test_sign_up_success(self):
        """Successful sign-up returns public profile, token and envelope."""
        payload = {
            "first_name": "New",
            "last_name": "Person",
            "email": "new@example.com",
            "password": "NewPass123!",
        }
        response = self.api_client.post("/auth/sign-up/", payload, format="json")
        body = response.json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(body["errors"], [])
        self.assertEqual(body["data"]["user"]["email"], payload["email"])
        self.assertEqual(set(body["data"]["user"]), {"id", "first_name", "last_name", "email"})
        claims = get_token_service().verify(body["data"]["accessToken"])
        self.assertEqual(claims["id"], body["data"]["user"]["id"])

    def test_sign_up_duplicate_email_409(self):
        payload = {
            "first_name": "Dup",
            "last_name": "User",
            "email": self.user.email,
            "password": "Password123",
        }
        response = self.api_client.post("/auth/sign-up/", payload, format="json")
        body = response.json()

        self.assertEqual(response.status_code, 409)
        self.assertIsNone(body["data"])
        self.assertEqual(body["code"], "conflict")

    def test_sign_up_mixed_case_duplicate_409(self):
        payload = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@Example.COM",
            "password": "Password123",
        }
        first = self.api_client.post("/auth/sign-up/", payload, format="json")
        second = self.api_client.post("/auth/sign-up/", payload, format="json")

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.status_code, 409)
        self.assertEqual(second.json()["code"], "conflict")

        response = self.api_client.post(
            "/auth/sign-in/",
            {"email": "ada@Example.COM", "password": "Password123"},
            format="json",
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["user"]["email"], "ada@Example.COM")

    def test_sign_up_validation_errors(self):
        """Short password and missing last name yield 400 with errors populated."""
        payload = {
            "first_name": "New",
            "email": "new2@example.com",
            "password": "short",
        }
        response = self.api_client.post("/auth/sign-up/", payload, format="json")
        body = response.json()

        self.assertEqual(response.status_code, 400)
        self.assertIsNone(body["data"])
        errors = body["errors"][0]
        self.assertEqual(errors["password"], ["Password must be at least 8 characters long"])
        self.assertEqual(errors["last_name"], ["Last name is required"])

    def test_sign_up_invalid_email(self):
        payload = {
            "first_name": "New",
            "last_name": "Person",
            "email": "not-an-email",
            "password": "Password123",
        }
        response = self.api_client.post("/auth/sign-up/", payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["errors"][0]["email"], ["Invalid email format"])

    def test_sign_in_success_returns_token(self):
        response = self.api_client.post(
            "/auth/sign-in/",
            {"email": self.user.email, "password": self.password},
            format="json",
        )
        body = response.json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(body["data"]["user"]["id"], self.user.pk)
        self.assertIn("accessToken", body["data"])
        self.assertEqual(body["errors"], [])

    def test_sign_in_invalid_credentials_400(self):
        """Bad password returns 400 with the shared credentials message."""
        response = self.api_client.post(
            "/auth/sign-in/",
            {"email": self.user.email, "password": "wrongpass"},
            format="json",
        )
        body = response.json()

        self.assertEqual(response.status_code, 400)
        self.assertIsNone(body["data"])
        self.assertEqual(body["errors"], ["Invalid Email or Password"])
        self.assertEqual(body["code"], "bad_request")

    def test_signed_in_token_can_create_article(self):
        token = self.api_client.post(
            "/auth/sign-in/",
            {"email": self.user.email, "password": self.password},
            format="json",
        ).json()["data"]["accessToken"]

        self.api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        response = self.api_client.post("/article/", {"title": "T", "description": "D"}, format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"]["user_id"], self.user.pk)
