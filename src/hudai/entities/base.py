"""Base models shared by all HUD.ai entities and attribute bags."""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HudAiModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python.

    Unknown fields are kept so that server additions are not lost. Numeric
    ids and other numbers sent where a string is declared are accepted as
    strings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


class Entity(HudAiModel):
    """An entity with server-assigned identity and timestamps."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ListAttributes(HudAiModel):
    """Pagination shared by list and search queries."""

    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)


class CreateAttributes(HudAiModel):
    pass


class UpdateAttributes(HudAiModel):
    pass


EntityT = TypeVar("EntityT", bound=BaseModel)


class Page(BaseModel, Generic[EntityT]):
    """A page of results; ``count`` is reported by the server, not recomputed."""

    count: int
    rows: List[EntityT]
