"""Company resource."""

from typing import Any, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.company import Company


class CompanyListAttributes(ListAttributes):
    name: Optional[str] = None


class CompanyCreateAttributes(CreateAttributes):
    name: str
    description: Optional[str] = None
    website_url: Optional[str] = None
    twitter_handle: Optional[str] = None


class CompanyUpdateAttributes(UpdateAttributes):
    name: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    twitter_handle: Optional[str] = None


class CompanyResource:
    mount_path = "/companies"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            Company,
            CompanyListAttributes,
            CompanyCreateAttributes,
            CompanyUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, Company)

    async def list(
        self,
        query: Optional[Union[CompanyListAttributes, Mapping[str, Any]]] = None,
    ) -> Page[Company]:
        return await self.client.list(query)

    async def create(
        self, body: Union[CompanyCreateAttributes, Mapping[str, Any]]
    ) -> Company:
        return await self.client.create(body)

    async def get(self, entity_id: EntityId) -> Company:
        return await self.client.get(entity_id)

    async def update(
        self,
        entity_id: EntityId,
        body: Union[CompanyUpdateAttributes, Mapping[str, Any]],
    ) -> Company:
        return await self.client.update(entity_id, body)

    async def destroy(self, entity_id: EntityId) -> None:
        await self.client.destroy(entity_id)

    delete = destroy
