"""Tweet entity."""

from datetime import datetime
from typing import Optional

from .base import Entity


class Tweet(Entity):
    person_id: str
    twitter_tweet_id: str
    importance_score: Optional[float] = None
    twitter_created_at: Optional[datetime] = None
    text: Optional[str] = None
