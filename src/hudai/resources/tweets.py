"""Tweet resource mounted under people."""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from ..api_clients.request_dispatcher import RequestDispatcher
from ..api_clients.resource import EntityId, ResourceClient, encode_segment
from ..entities.base import CreateAttributes, ListAttributes, Page, UpdateAttributes
from ..entities.tweet import Tweet


class TweetListAttributes(ListAttributes):
    person_id: Optional[str] = None
    min_importance: Optional[float] = None


class TweetSearchAttributes(ListAttributes):
    id: Optional[str] = None
    person_id: Optional[str] = None
    twitter_tweet_id: Optional[str] = None
    text: Optional[str] = None
    min_importance: Optional[float] = None
    max_importance: Optional[float] = None
    terms: List[str]
    created_before: Optional[datetime] = None
    created_after: Optional[datetime] = None


class TweetCreateAttributes(CreateAttributes):
    person_id: str
    twitter_tweet_id: str
    importance_score: Optional[float] = None
    twitter_created_at: datetime
    text: str


class TweetResource:
    """Tweets mounted at ``/people/tweets``.

    Tweets are immutable once stored, so there is no update operation.
    """

    mount_path = "/people/tweets"

    def __init__(self, dispatcher: RequestDispatcher):
        self.client: ResourceClient[
            Tweet, TweetListAttributes, TweetCreateAttributes, UpdateAttributes
        ] = ResourceClient(self.mount_path, dispatcher, Tweet)

    async def list(
        self, query: Optional[Union[TweetListAttributes, Mapping[str, Any]]] = None
    ) -> Page[Tweet]:
        return await self.client.list(query)

    async def search(
        self, query: Union[TweetSearchAttributes, Mapping[str, Any]]
    ) -> Page[Tweet]:
        body = await self.client.request("GET", "search", params=query)
        return self.client.parse(Page[Tweet], body)

    async def reindex(self) -> Any:
        """Ask the server to rebuild the tweet search index."""
        return await self.client.request("POST", "search/reindex")

    async def create(
        self, body: Union[TweetCreateAttributes, Mapping[str, Any]]
    ) -> Tweet:
        return await self.client.create(body)

    async def get(self, tweet_id: EntityId) -> Tweet:
        return await self.client.get(tweet_id)

    async def get_by_twitter_tweet_id(self, twitter_tweet_id: EntityId) -> Tweet:
        body = await self.client.request(
            "GET", f"by-twitter-id/{encode_segment(twitter_tweet_id)}"
        )
        return self.client.parse(Tweet, body)

    async def destroy(self, tweet_id: EntityId) -> None:
        await self.client.destroy(tweet_id)

    delete = destroy
