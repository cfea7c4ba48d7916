"""Tests for the seed_articles management command."""

from __future__ import annotations

from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase

from articles.models import Article
from authentication.hashers import get_password_hasher


class SeedArticlesCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_articles", stdout=StringIO())
        call_command("seed_articles", stdout=StringIO())

        User = get_user_model()
        self.assertEqual(User.objects.filter(email__endswith="@example.com").count(), 2)
        self.assertEqual(Article.objects.count(), 4)

        admin = User.objects.get(email="admin@example.com")
        self.assertEqual(admin.role, User.Role.ADMIN)
        self.assertEqual(admin.password_hash, get_password_hasher().hash("adminpass"))

    def test_reset_recreates_data(self):
        call_command("seed_articles", stdout=StringIO())
        Article.objects.filter(title="User Article 1").delete()

        out = StringIO()
        call_command("seed_articles", "--reset", stdout=out)

        self.assertEqual(Article.objects.count(), 4)
        self.assertIn("Seed completed", out.getvalue())
