"""Unit tests for TweetResource."""

import pytest

from hudai.api_clients.exceptions import InvalidResponseError, NotFoundError
from hudai.entities.tweet import Tweet

TWEET = {
    "id": "t1",
    "personId": "p1",
    "twitterTweetId": "998877",
    "text": "hello",
    "importanceScore": 0.7,
}


class TestTweetResource:
    @pytest.mark.asyncio
    async def test_mounted_under_people(self, make_client, fake_server):
        fake_server.add_json("GET", "/people/tweets", {"count": 1, "rows": [TWEET]})
        client = make_client()

        page = await client.tweet.list({"personId": "p1"})

        assert page.rows[0].twitter_tweet_id == "998877"
        assert fake_server.api_requests[0].url.params["personId"] == "p1"

    @pytest.mark.asyncio
    async def test_search_sends_terms(self, make_client, fake_server):
        fake_server.add_json("GET", "/people/tweets/search", {"count": 0, "rows": []})
        client = make_client()

        await client.tweet.search({"terms": ["ai", "chips"], "limit": 5})

        params = fake_server.api_requests[0].url.params
        assert params.get_list("terms") == ["ai", "chips"]
        assert params["limit"] == "5"

    @pytest.mark.asyncio
    async def test_reindex_posts_without_body(self, make_client, fake_server):
        fake_server.add_json("POST", "/people/tweets/search/reindex", {"queued": True})
        client = make_client()

        result = await client.tweet.reindex()

        assert result == {"queued": True}
        request = fake_server.api_requests[0]
        assert request.method == "POST"
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_get_by_twitter_tweet_id(self, make_client, fake_server):
        fake_server.add_json("GET", "/people/tweets/by-twitter-id/998877", TWEET)
        client = make_client()

        tweet = await client.tweet.get_by_twitter_tweet_id("998877")

        assert isinstance(tweet, Tweet)
        assert tweet.id == "t1"
        assert tweet.person_id == "p1"

    @pytest.mark.asyncio
    async def test_unknown_twitter_id_raises_not_found(self, make_client):
        client = make_client()

        with pytest.raises(NotFoundError):
            await client.tweet.get_by_twitter_tweet_id("0")

    def test_tweets_cannot_be_updated(self, make_client):
        assert not hasattr(make_client().tweet, "update")


class TestTweetResponses:
    @pytest.mark.asyncio
    async def test_numeric_ids_are_accepted(self, make_client, fake_server):
        fake_server.add_json(
            "GET",
            "/people/tweets/by-twitter-id/998877",
            {"id": 5, "personId": 9, "twitterTweetId": 998877},
        )
        client = make_client()

        tweet = await client.tweet.get_by_twitter_tweet_id(998877)

        assert (tweet.id, tweet.person_id, tweet.twitter_tweet_id) == ("5", "9", "998877")

    @pytest.mark.asyncio
    async def test_malformed_search_page(self, make_client, fake_server):
        fake_server.add_json("GET", "/people/tweets/search", {"rows": "nope"})
        client = make_client()

        with pytest.raises(InvalidResponseError):
            await client.tweet.search({"terms": ["ai"]})
