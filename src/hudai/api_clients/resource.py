"""Generic resource client providing CRUD primitives over one mount path."""

import logging
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..entities.base import Page
from .exceptions import InvalidResponseError
from .request_dispatcher import RequestDescriptor, RequestDispatcher
from .serialization import Payload

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)
ListT = TypeVar("ListT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)

EntityId = Union[str, int]


def encode_segment(value: Any) -> str:
    """Percent-encode one path segment, including any ``/`` or ``?``."""
    return quote(str(value), safe="")


def parse_response(target: Any, body: Any, source: str) -> Any:
    """Validate a response body against a type or ``TypeAdapter``.

    Raises:
        InvalidResponseError: If the body does not have the expected shape
    """
    adapter = target if isinstance(target, TypeAdapter) else TypeAdapter(target)
    try:
        return adapter.validate_python(body)
    except ValidationError as e:
        logger.debug(f"Response from {source} failed validation: {e}")
        raise InvalidResponseError(
            f"Unexpected response from {source}: {e.error_count()} invalid field(s)",
            body,
        ) from e


class ResourceClient(Generic[EntityT, ListT, CreateT, UpdateT]):
    """CRUD operations for one entity family mounted at ``mount_path``.

    Concrete resources hold one of these and add their own operations through
    :meth:`request`, which goes through the same dispatcher and therefore the
    same authentication.

    Query and body arguments may be the typed attribute models or plain
    mappings. Typed models are sent with their camelCase aliases; mapping keys
    are sent exactly as given, so they must already be in wire form
    (``{"publishedAfter": ...}``). Either way dates are serialized uniformly
    by the dispatcher.
    """

    def __init__(
        self,
        mount_path: str,
        dispatcher: RequestDispatcher,
        entity_type: Type[EntityT],
    ):
        self.mount_path = "/" + mount_path.strip("/")
        self.dispatcher = dispatcher
        self.entity_type = entity_type

    def path(self, *segments: Any) -> str:
        """Build a URL under the mount path, encoding each segment."""
        parts = [self.mount_path]
        parts.extend(encode_segment(segment) for segment in segments)
        return "/".join(parts)

    async def request(
        self,
        method: str,
        sub_path: str = "",
        params: Optional[Payload] = None,
        data: Optional[Payload] = None,
    ) -> Any:
        """Dispatch a request to ``{mount_path}/{sub_path}`` and return the raw body.

        ``sub_path`` is used verbatim; encode ids in it with :func:`encode_segment`.
        """
        sub_path = sub_path.strip("/")
        url = f"{self.mount_path}/{sub_path}" if sub_path else self.mount_path
        return await self.dispatcher.dispatch(
            RequestDescriptor(method=method, url=url, params=params, data=data)
        )

    def parse(self, target: Any, body: Any) -> Any:
        return parse_response(target, body, self.mount_path)

    async def list(
        self, query: Optional[Union[ListT, Mapping[str, Any]]] = None
    ) -> Page[EntityT]:
        """GET {mount_path} with query parameters."""
        body = await self.request("GET", params=query)
        return self.parse(Page[self.entity_type], body)  # type: ignore[name-defined]

    async def get(self, entity_id: EntityId) -> EntityT:
        """GET {mount_path}/{id}.

        Raises:
            NotFoundError: If the server has no entity with this id
        """
        body = await self.request("GET", encode_segment(entity_id))
        return self.parse(self.entity_type, body)

    async def create(self, body: Union[CreateT, Mapping[str, Any]]) -> EntityT:
        """POST {mount_path}."""
        created = await self.request("POST", data=body)
        return self.parse(self.entity_type, created)

    async def update(
        self, entity_id: EntityId, body: Union[UpdateT, Mapping[str, Any]]
    ) -> EntityT:
        """PATCH {mount_path}/{id}."""
        updated = await self.request("PATCH", encode_segment(entity_id), data=body)
        return self.parse(self.entity_type, updated)

    async def destroy(self, entity_id: EntityId) -> None:
        """DELETE {mount_path}/{id}.

        A second delete of the same id raises NotFoundError, as the server reports it.
        """
        await self.request("DELETE", encode_segment(entity_id))
        logger.debug(f"Deleted {self.mount_path}/{entity_id}")
