"""Post (and optionally delete) a tweet with credentials from the environment.

Usage:
    python -m tweers tweet <text> [--api v1|v2] [--delete]

Credentials are read from TWITTER_CONSUMER_KEY / TWITTER_CONSUMER_SECRET /
TWITTER_ACCESS_TOKEN_KEY / TWITTER_ACCESS_TOKEN_SECRET (or CK / CS / AT / AS),
from the environment or a .env file.
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from tweers.core.config import settings
from tweers.core.exceptions import ConfigurationError, EncodingError, ExternalServiceError
from tweers.domains.twitter.client import TwitterClient, status_url
from tweers.domains.twitter.types import JsonValue
from tweers.domains.twitter.v1 import TwitterV1
from tweers.domains.twitter.v2 import TwitterV2


def _tweet_id(api: str, response: JsonValue) -> Optional[str]:
    if not isinstance(response, dict):
        return None
    if api == "v1":
        return response.get("id_str")
    data = response.get("data")
    return data.get("id") if isinstance(data, dict) else None


async def _tweet(text: str, api: str, delete: bool, client: TwitterClient) -> None:
    wrapper = TwitterV1(client) if api == "v1" else TwitterV2(client)

    response = await wrapper.create_tweet(text)
    print(json.dumps(response, ensure_ascii=False, indent=2))

    tweet_id = _tweet_id(api, response)
    if tweet_id is None:
        return
    print(status_url(tweet_id, settings.TWITTER_URL))

    if delete:
        response = await wrapper.delete_tweet(tweet_id)
        print(json.dumps(response, ensure_ascii=False, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tweers", description="Twitter API client")
    commands = parser.add_subparsers(dest="command", required=True)

    tweet = commands.add_parser("tweet", help="Post a tweet")
    tweet.add_argument("text", help="Tweet content")
    tweet.add_argument("--api", default="v2", choices=["v1", "v2"], help="API version")
    tweet.add_argument("--delete", action="store_true", help="Delete the tweet after posting")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[TwitterClient] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        client = client or TwitterClient.from_settings()
        asyncio.run(_tweet(args.text, args.api, args.delete, client))
    except (ConfigurationError, EncodingError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except ExternalServiceError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
