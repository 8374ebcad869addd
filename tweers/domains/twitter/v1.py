"""Twitter API v1.1 endpoint wrappers.

| Twitter API v1.1 Endpoint      | Method                      |
| ------------------------------ | --------------------------- |
| POST /1.1/statuses/update.json | ``TwitterV1.create_tweet()`` |
| POST /1.1/statuses/destroy/:id | ``TwitterV1.delete_tweet()`` |
"""

from urllib.parse import quote

from tweers.domains.twitter.client import TwitterClient
from tweers.domains.twitter.types import JsonValue


class TwitterV1:
    """v1.1 status endpoints. Parameters travel in the query string and are signed."""

    def __init__(self, client: TwitterClient) -> None:
        self._client = client

    async def create_tweet(self, text: str) -> JsonValue:
        """Post a status update."""
        return await self._client.post("/1.1/statuses/update.json", params={"status": text})

    async def delete_tweet(self, tweet_id: str) -> JsonValue:
        """Delete a status by id."""
        return await self._client.post(
            f"/1.1/statuses/destroy/{quote(str(tweet_id), safe='')}.json"
        )
