"""Text corpus entity."""

from typing import Optional

from .base import Entity


class TextCorpus(Entity):
    body: str
    type: Optional[str] = None
    source_url: Optional[str] = None
