"""ORM-backed persistence for articles."""

from typing import Any, Optional

from django.utils import timezone

from .models import Article


class ArticleRepository:
    """Thin wrapper over ``Article.objects`` used by :class:`ArticleService`."""

    def create(self, **fields: Any) -> Article:
        return Article.objects.create(**fields)

    def find_by_id(self, article_id: int, with_user: bool = False) -> Optional[Article]:
        queryset = Article.objects.all()
        if with_user:
            queryset = queryset.select_related("user")
        return queryset.filter(pk=article_id).first()

    def find_many_paged(self, filters: dict[str, Any], skip: int, take: int) -> tuple[list[Article], int]:
        """Return one page of matches (owner joined) and the unpaged total."""
        queryset = Article.objects.select_related("user").filter(**filters)
        total = queryset.count()
        return list(queryset[skip:skip + take]), total

    def update_by_id(self, article_id: int, fields: dict[str, Any]) -> int:
        # QuerySet.update() skips auto_now, so bump updated_at explicitly.
        return Article.objects.filter(pk=article_id).update(updated_at=timezone.now(), **fields)

    def delete_by_id(self, article_id: int) -> int:
        _, per_model = Article.objects.filter(pk=article_id).delete()
        return per_model.get(Article._meta.label, 0)


__all__ = ["ArticleRepository"]
