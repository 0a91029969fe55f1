"""Article highlight resource."""

from typing import Any, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.article_highlight import ArticleHighlight


class ArticleHighlightListAttributes(ListAttributes):
    article_id: Optional[str] = None
    user_id: Optional[str] = None


class ArticleHighlightCreateAttributes(CreateAttributes):
    article_id: str
    user_id: Optional[str] = None
    company_id: Optional[str] = None
    body: Optional[str] = None


class ArticleHighlightUpdateAttributes(UpdateAttributes):
    body: Optional[str] = None


class ArticleHighlightResource:
    mount_path = "/articles/highlights"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            ArticleHighlight,
            ArticleHighlightListAttributes,
            ArticleHighlightCreateAttributes,
            ArticleHighlightUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, ArticleHighlight)

    async def list(
        self,
        query: Optional[Union[ArticleHighlightListAttributes, Mapping[str, Any]]] = None,
    ) -> Page[ArticleHighlight]:
        return await self.client.list(query)

    async def create(
        self, body: Union[ArticleHighlightCreateAttributes, Mapping[str, Any]]
    ) -> ArticleHighlight:
        return await self.client.create(body)

    async def get(self, entity_id: EntityId) -> ArticleHighlight:
        return await self.client.get(entity_id)

    async def update(
        self,
        entity_id: EntityId,
        body: Union[ArticleHighlightUpdateAttributes, Mapping[str, Any]],
    ) -> ArticleHighlight:
        return await self.client.update(entity_id, body)

    async def destroy(self, entity_id: EntityId) -> None:
        await self.client.destroy(entity_id)

    delete = destroy
