"""Article resource: CRUD plus full-text and relevance search."""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from pydantic import TypeAdapter

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..api_clients.serialization import serialize_payload
from ..entities.article import (
    Article,
    ArticleSearchResult,
    GroupedTagCount,
    TermSearchGroup,
)
from ..entities.base import (
    CreateAttributes,
    ListAttributes,
    Page,
    UpdateAttributes,
)


class ArticleListAttributes(ListAttributes):
    type: Optional[str] = None
    importance_score_min: Optional[float] = None
    key_term: Optional[str] = None
    link_hash: Optional[str] = None
    published_after: Optional[datetime] = None
    published_before: Optional[datetime] = None


class ArticleCreateAttributes(CreateAttributes):
    authors: Optional[List[str]] = None
    image_url: Optional[str] = None
    importance_score: Optional[float] = None
    link_url: str
    published_at: Optional[datetime] = None
    raw_data_url: str
    source_url: str
    text: Optional[str] = None
    title: str
    type: str


class ArticleUpdateAttributes(UpdateAttributes):
    authors: Optional[List[str]] = None
    image_url: Optional[str] = None
    importance_score: Optional[float] = None
    link_url: Optional[str] = None
    published_at: Optional[datetime] = None
    raw_data_url: Optional[str] = None
    source_url: Optional[str] = None
    text: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None


class ArticleSearchAttributes(ListAttributes):
    authors: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    key_terms: Optional[List[str]] = None
    published_before: Optional[datetime] = None
    published_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
    created_after: Optional[datetime] = None
    scored_before: Optional[datetime] = None
    scored_after: Optional[datetime] = None
    min_importance: Optional[float] = None
    max_importance: Optional[float] = None
    type: Optional[str] = None
    text: Optional[str] = None


class ArticleSearchRelevantAttributes(ArticleSearchAttributes):
    min_relevance: Optional[float] = None
    max_relevance: Optional[float] = None
    user_id: Optional[str] = None


ListQuery = Union[ArticleListAttributes, Mapping[str, Any]]
SearchQuery = Union[ArticleSearchAttributes, Mapping[str, Any]]
RelevantQuery = Union[ArticleSearchRelevantAttributes, Mapping[str, Any]]

_term_groups = TypeAdapter(List[TermSearchGroup])
_tag_counts = TypeAdapter(GroupedTagCount)


class ArticleResource:
    """Articles mounted at ``/articles``."""

    mount_path = "/articles"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            Article,
            ArticleListAttributes,
            ArticleCreateAttributes,
            ArticleUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, Article)

    async def list(self, query: Optional[ListQuery] = None) -> Page[Article]:
        return await self.client.list(query)

    async def search(self, query: SearchQuery) -> Page[ArticleSearchResult]:
        """Full-text search over articles."""
        body = await self.client.request("GET", "search", params=query)
        return self.client.parse(Page[ArticleSearchResult], body)

    async def search_related(
        self, query: RelevantQuery
    ) -> Page[ArticleSearchResult]:
        """Search articles ranked by relevance to a user's key terms."""
        body = await self.client.request("GET", "search/relevant", params=query)
        return self.client.parse(Page[ArticleSearchResult], body)

    async def search_by_term(self, query: RelevantQuery) -> List[TermSearchGroup]:
        """Relevant articles grouped by the key term that matched them."""
        body = await self.client.request(
            "GET", "search/relevant/grouped/by-term", params=query
        )
        return self.client.parse(_term_groups, body)

    async def count_tags_by_term(self, query: RelevantQuery) -> GroupedTagCount:
        """Tag counts of relevant articles, grouped by key term."""
        params = serialize_payload(query) or {}
        params["countTags"] = True
        body = await self.client.request(
            "GET", "search/relevant/grouped/by-term", params=params
        )
        return self.client.parse(_tag_counts, body)

    async def create(
        self, body: Union[ArticleCreateAttributes, Mapping[str, Any]]
    ) -> Article:
        return await self.client.create(body)

    async def get(self, article_id: EntityId) -> Article:
        return await self.client.get(article_id)

    async def update(
        self,
        article_id: EntityId,
        body: Union[ArticleUpdateAttributes, Mapping[str, Any]],
    ) -> Article:
        return await self.client.update(article_id, body)

    async def destroy(self, article_id: EntityId) -> None:
        await self.client.destroy(article_id)

    delete = destroy


__all__ = [
    "ArticleCreateAttributes",
    "ArticleListAttributes",
    "ArticleResource",
    "ArticleSearchAttributes",
    "ArticleSearchRelevantAttributes",
    "ArticleUpdateAttributes",
]
