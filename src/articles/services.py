"""Article use cases with owner-only mutations and filtered listing."""

import logging
from typing import Any, Optional

from core.exceptions import BadRequest, NotFound, Unauthorized
from core.validators import parse_iso_datetime
from .models import Article
from .repositories import ArticleRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description")


class ArticleService:
    """CRUD over articles; update/delete require the caller to own the article."""

    def __init__(self, repository: ArticleRepository):
        self.repository = repository

    def create(self, data: dict[str, Any], owner_id: int) -> Article:
        """Persist a new article owned by ``owner_id``."""
        article = self.repository.create(
            title=data["title"],
            description=data["description"],
            user_id=owner_id,
        )
        logger.info("Article %s created by user %s", article.pk, owner_id)
        return article

    def list(
        self,
        page: int = 1,
        limit: int = 10,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> dict[str, Any]:
        """Return ``{"data", "total", "page", "limit"}`` for the given filters.

        Dates must be strict ISO-8601 UTC strings. Both dates give an
        inclusive range on ``created_at``; a single date is an open-ended
        bound. ``user_id`` of 0 or None disables the owner filter.
        """
        start = end = None
        if start_date:
            start = parse_iso_datetime(start_date)
            if start is None:
                raise BadRequest("Invalid start_date format")
        if end_date:
            end = parse_iso_datetime(end_date)
            if end is None:
                raise BadRequest("Invalid end_date format")

        filters: dict[str, Any] = {}
        if start and end:
            filters["created_at__range"] = (start, end)
        elif start:
            filters["created_at__gte"] = start
        elif end:
            filters["created_at__lte"] = end
        if user_id:
            filters["user_id"] = user_id

        page = int(page)
        limit = int(limit)
        items, total = self.repository.find_many_paged(filters, skip=(page - 1) * limit, take=limit)
        return {"data": items, "total": total, "page": page, "limit": limit}

    def find_one(self, article_id: int) -> Article:
        article = self.repository.find_by_id(article_id, with_user=True)
        if article is None:
            raise NotFound(f"Article with ID {article_id} not found")
        return article

    def update(self, article_id: int, patch: dict[str, Any], user_id: int) -> Article:
        """Apply the non-empty fields in ``patch``; a patch with none is a no-op."""
        article = self._get_owned(article_id, user_id, action="update")

        changes = {
            field: patch[field]
            for field in UPDATABLE_FIELDS
            if patch.get(field)
        }
        if not changes:
            return article

        self.repository.update_by_id(article_id, changes)
        logger.info("Article %s updated by user %s", article_id, user_id)
        return self.find_one(article_id)

    def remove(self, article_id: int, user_id: int) -> bool:
        """Delete the article; True when exactly one row was removed."""
        self._get_owned(article_id, user_id, action="delete")
        deleted = self.repository.delete_by_id(article_id)
        logger.info("Article %s deleted by user %s", article_id, user_id)
        return deleted == 1

    def _get_owned(self, article_id: int, user_id: int, action: str) -> Article:
        article = self.repository.find_by_id(article_id, with_user=True)
        if article is None:
            raise NotFound("Article not found")
        if article.user_id != user_id:
            logger.warning("User %s tried to %s article %s", user_id, action, article_id)
            raise Unauthorized(f"You are not authorized to {action} this article")
        return article


def get_article_service() -> ArticleService:
    """Compose the default ArticleService over the ORM repository."""
    return ArticleService(ArticleRepository())


__all__ = ["ArticleService", "UPDATABLE_FIELDS", "get_article_service"]
