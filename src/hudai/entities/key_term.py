"""Key term entity."""

from typing import Optional

from .base import Entity


class KeyTerm(Entity):
    term: str
    importance_score: Optional[float] = None
