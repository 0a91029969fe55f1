"""User resource."""

from typing import Any, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.user import User


class UserListAttributes(ListAttributes):
    email: Optional[str] = None
    company_id: Optional[str] = None


class UserCreateAttributes(CreateAttributes):
    email: str
    name: Optional[str] = None
    company_id: Optional[str] = None
    time_zone: Optional[str] = None


class UserUpdateAttributes(UpdateAttributes):
    email: Optional[str] = None
    name: Optional[str] = None
    company_id: Optional[str] = None
    time_zone: Optional[str] = None


class UserResource:
    mount_path = "/users"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            User,
            UserListAttributes,
            UserCreateAttributes,
            UserUpdateAttributes,
        ] = ResourceClient(self.mount_path, dispatcher, User)

    async def list(
        self,
        query: Optional[Union[UserListAttributes, Mapping[str, Any]]] = None,
    ) -> Page[User]:
        return await self.client.list(query)

    async def create(
        self, body: Union[UserCreateAttributes, Mapping[str, Any]]
    ) -> User:
        return await self.client.create(body)

    async def get(self, entity_id: EntityId) -> User:
        return await self.client.get(entity_id)

    async def update(
        self,
        entity_id: EntityId,
        body: Union[UserUpdateAttributes, Mapping[str, Any]],
    ) -> User:
        return await self.client.update(entity_id, body)

    async def destroy(self, entity_id: EntityId) -> None:
        await self.client.destroy(entity_id)

    delete = destroy
