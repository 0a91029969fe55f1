"""Article highlight entity: a user's pick of an article."""

from typing import Optional

from .base import Entity


class ArticleHighlight(Entity):
    article_id: str
    user_id: Optional[str] = None
    company_id: Optional[str] = None
    body: Optional[str] = None
