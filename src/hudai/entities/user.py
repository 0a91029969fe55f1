"""User entity."""

from typing import Optional

from .base import Entity


class User(Entity):
    email: str
    name: Optional[str] = None
    company_id: Optional[str] = None
    time_zone: Optional[str] = None
