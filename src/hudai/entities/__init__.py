"""Entity models returned by the HUD.ai API."""

from .article import (
    Article,
    ArticleSearchResult,
    BasicArticle,
    GroupedTagCount,
    TermSearchGroup,
)
from .article_highlight import ArticleHighlight
from .base import (
    CreateAttributes,
    Entity,
    HudAiModel,
    ListAttributes,
    Page,
    UpdateAttributes,
)
from .company import Company
from .domain import Domain
from .key_term import KeyTerm
from .text_corpus import TextCorpus
from .tweet import Tweet
from .user import User

__all__ = [
    "Article",
    "ArticleHighlight",
    "ArticleSearchResult",
    "BasicArticle",
    "Company",
    "CreateAttributes",
    "Domain",
    "Entity",
    "GroupedTagCount",
    "HudAiModel",
    "KeyTerm",
    "ListAttributes",
    "Page",
    "TermSearchGroup",
    "TextCorpus",
    "Tweet",
    "UpdateAttributes",
    "User",
]
