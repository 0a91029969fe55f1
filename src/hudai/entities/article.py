"""Article entities."""

from datetime import datetime
from typing import Dict, List, Optional

from .base import Entity, HudAiModel


class BasicAuthor(HudAiModel):
    id: Optional[str] = None
    name: str


class BasicArticleTag(HudAiModel):
    id: Optional[str] = None
    name: str


class BasicKeyTerm(HudAiModel):
    term: str


class BasicArticleCompany(HudAiModel):
    id: Optional[str] = None
    name: Optional[str] = None


class BasicArticle(Entity):
    key_terms: Optional[List[BasicKeyTerm]] = None
    authors: Optional[List[BasicAuthor]] = None
    tags: Optional[List[BasicArticleTag]] = None
    image_url: Optional[str] = None
    importance_score: Optional[float] = None
    link_url: Optional[str] = None
    source_id: Optional[str] = None
    published_at: Optional[datetime] = None
    text: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None


class Article(BasicArticle):
    link_hash: Optional[str] = None
    raw_data_url: Optional[str] = None
    source_url: Optional[str] = None


class ArticleSearchResult(BasicArticle):
    group_id: Optional[str] = None
    companies: List[BasicArticleCompany] = []


class TermSearchGroup(HudAiModel):
    """Relevant articles grouped under one key term."""

    term: str
    count: int
    rows: List[ArticleSearchResult]


# {term: {tag: count}}
GroupedTagCount = Dict[str, Dict[str, int]]

__all__ = [
    "Article",
    "ArticleSearchResult",
    "BasicArticle",
    "BasicArticleCompany",
    "BasicArticleTag",
    "BasicAuthor",
    "BasicKeyTerm",
    "GroupedTagCount",
    "TermSearchGroup",
]
