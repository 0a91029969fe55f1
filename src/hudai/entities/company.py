"""Company entity."""

from typing import Optional

from .base import Entity


class Company(Entity):
    name: str
    description: Optional[str] = None
    website_url: Optional[str] = None
    twitter_handle: Optional[str] = None
