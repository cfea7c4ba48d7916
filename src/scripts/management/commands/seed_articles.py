"""Seed demo users and articles."""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from articles.models import Article

DEMO_USERS = [
    ("admin@example.com", "Admin", "Demo", "adminpass", "admin"),
    ("user@example.com", "User", "Demo", "userpass", "user"),
]

DEMO_ARTICLES = [
    ("admin@example.com", "Admin Article 1", "Content by admin."),
    ("admin@example.com", "Admin Article 2", "Another admin article."),
    ("user@example.com", "User Article 1", "User owned article."),
    ("user@example.com", "User Article 2", "Another user article."),
]


def create_seed_users() -> dict:
    """Create the demo users if missing and return an email->User map."""
    User = get_user_model()
    users = {}
    for email, first_name, last_name, password, role in DEMO_USERS:
        user = User.objects.filter(email=email).first()
        if user is None:
            user = User.objects.create_user(
                email,
                password,
                first_name=first_name,
                last_name=last_name,
                role=role,
            )
        users[email] = user
    return users


def create_seed_articles(users: dict) -> list:
    """Create the demo articles for the seeded users."""
    articles = []
    for email, title, description in DEMO_ARTICLES:
        article, _ = Article.objects.get_or_create(
            title=title,
            user=users[email],
            defaults={"description": description},
        )
        articles.append(article)
    return articles


class Command(BaseCommand):
    """Management command to seed demo users and their articles."""

    help = (
        "Seed demo users and articles. "
        "Use --reset to clear previously seeded data first."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete the demo users (and, by cascade, their articles) before seeding.",
        )

    def handle(self, *args, **options):
        """Entrypoint for the management command."""
        if options.get("reset"):
            User = get_user_model()
            User.objects.filter(email__in=[row[0] for row in DEMO_USERS]).delete()
            self.stdout.write(self.style.WARNING("Seeded demo data cleared."))

        self.stdout.write("Seeding demo data...")
        users = create_seed_users()
        articles = create_seed_articles(users)
        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: {len(users)} users, {len(articles)} articles.")
        )
