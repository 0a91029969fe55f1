"""Text corpus resource."""

from typing import Any, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.text_corpus import TextCorpus


class TextCorpusListAttributes(ListAttributes):
    type: Optional[str] = None


class TextCorpusCreateAttributes(CreateAttributes):
    body: str
    type: Optional[str] = None
    source_url: Optional[str] = None


class TextCorpusUpdateAttributes(UpdateAttributes):
    body: Optional[str] = None
    type: Optional[str] = None
    source_url: Optional[str] = None


class TextCorpusResource:
    mount_path = "/text-corpora"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            TextCorpus,
            TextCorpusListAttributes,
            TextCorpusCreateAttributes,
            TextCorpusUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, TextCorpus)

    async def list(
        self,
        query: Optional[Union[TextCorpusListAttributes, Mapping[str, Any]]] = None,
    ) -> Page[TextCorpus]:
        return await self.client.list(query)

    async def create(
        self, body: Union[TextCorpusCreateAttributes, Mapping[str, Any]]
    ) -> TextCorpus:
        return await self.client.create(body)

    async def get(self, entity_id: EntityId) -> TextCorpus:
        return await self.client.get(entity_id)

    async def update(
        self,
        entity_id: EntityId,
        body: Union[TextCorpusUpdateAttributes, Mapping[str, Any]],
    ) -> TextCorpus:
        return await self.client.update(entity_id, body)

    async def destroy(self, entity_id: EntityId) -> None:
        await self.client.destroy(entity_id)

    delete = destroy
