"""Domain entity: a news source host articles are scraped from."""

from typing import Optional

from .base import Entity


class Domain(Entity):
    hostname: str
    name: Optional[str] = None
    is_enabled: Optional[bool] = None
