"""Concrete HUD.ai resources, one per entity family."""

from .article_highlights import ArticleHighlightResource
from .articles import ArticleResource
from .companies import CompanyResource
from .domains import DomainResource
from .key_terms import KeyTermResource
from .text_corpora import TextCorpusResource
from .tweets import TweetResource
from .users import UserResource

__all__ = [
    "ArticleHighlightResource",
    "ArticleResource",
    "CompanyResource",
    "DomainResource",
    "KeyTermResource",
    "TextCorpusResource",
    "TweetResource",
    "UserResource",
]
