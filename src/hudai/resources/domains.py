"""Domain resource."""

from typing import Any, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.domain import Domain


class DomainListAttributes(ListAttributes):
    hostname: Optional[str] = None
    is_enabled: Optional[bool] = None


class DomainCreateAttributes(CreateAttributes):
    hostname: str
    name: Optional[str] = None
    is_enabled: Optional[bool] = None


class DomainUpdateAttributes(UpdateAttributes):
    name: Optional[str] = None
    is_enabled: Optional[bool] = None


class DomainResource:
    mount_path = "/domains"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            Domain,
            DomainListAttributes,
            DomainCreateAttributes,
            DomainUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, Domain)

    async def list(
        self,
        query: Optional[Union[DomainListAttributes, Mapping[str, Any]]] = None,
    ) -> Page[Domain]:
        return await self.client.list(query)

    async def create(
        self, body: Union[DomainCreateAttributes, Mapping[str, Any]]
    ) -> Domain:
        return await self.client.create(body)

    async def get(self, entity_id: EntityId) -> Domain:
        return await self.client.get(entity_id)

    async def update(
        self,
        entity_id: EntityId,
        body: Union[DomainUpdateAttributes, Mapping[str, Any]],
    ) -> Domain:
        return await self.client.update(entity_id, body)

    async def destroy(self, entity_id: EntityId) -> None:
        await self.client.destroy(entity_id)

    delete = destroy
