"""Key term resource."""

from typing import Any, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.key_term import KeyTerm


class KeyTermListAttributes(ListAttributes):
    term: Optional[str] = None


class KeyTermCreateAttributes(CreateAttributes):
    term: str
    importance_score: Optional[float] = None


class KeyTermUpdateAttributes(UpdateAttributes):
    importance_score: Optional[float] = None


class KeyTermResource:
    mount_path = "/key-terms"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            KeyTerm,
            KeyTermListAttributes,
            KeyTermCreateAttributes,
            KeyTermUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, KeyTerm)

    async def list(
        self,
        query: Optional[Union[KeyTermListAttributes, Mapping[str, Any]]] = None,
    ) -> Page[KeyTerm]:
        return await self.client.list(query)

    async def create(
        self, body: Union[KeyTermCreateAttributes, Mapping[str, Any]]
    ) -> KeyTerm:
        return await self.client.create(body)

    async def get(self, entity_id: EntityId) -> KeyTerm:
        return await self.client.get(entity_id)

    async def update(
        self,
        entity_id: EntityId,
        body: Union[KeyTermUpdateAttributes, Mapping[str, Any]],
    ) -> KeyTerm:
        return await self.client.update(entity_id, body)

    async def destroy(self, entity_id: EntityId) -> None:
        await self.client.destroy(entity_id)

    delete = destroy
