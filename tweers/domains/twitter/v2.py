"""Twitter API v2 endpoint wrappers.

| Twitter API v2 Endpoint | Method                      |
| ----------------------- | --------------------------- |
| POST /2/tweets          | ``TwitterV2.create_tweet()`` |
| DELETE /2/tweets/:id    | ``TwitterV2.delete_tweet()`` |
"""

from urllib.parse import quote

from tweers.domains.twitter.client import TwitterClient
from tweers.domains.twitter.types import JsonValue


class TwitterV2:
    """v2 tweet endpoints. Request bodies are JSON and are not part of the signature."""

    def __init__(self, client: TwitterClient) -> None:
        self._client = client

    async def create_tweet(self, text: str) -> JsonValue:
        """Create a tweet."""
        return await self._client.post("/2/tweets", json={"text": text})

    async def delete_tweet(self, tweet_id: str) -> JsonValue:
        """Delete a tweet by id."""
        return await self._client.delete(f"/2/tweets/{quote(str(tweet_id), safe='')}")
