from __future__ import annotations

from .response import HttpxRedditResponses, decode_response, parse_body
from ..common.response_factory import create_reddit_responses, RedditResponses
from ...settings import ResponseSettings


def create_httpx_responses(settings: ResponseSettings | None = None) -> HttpxRedditResponses:
    """
    High-level helper for httpx-based clients:

    - Creates RedditResponses with the given settings
    - Wraps them in HttpxRedditResponses, exposing:

        responses.refresh_token(resp)
        responses.identity(resp)
        responses.item(resp)
        responses.listing(resp)
    """
    settings = settings or ResponseSettings()
    responses: RedditResponses = create_reddit_responses(settings)
    return HttpxRedditResponses(responses=responses, settings=settings)


__all__ = ["HttpxRedditResponses", "create_httpx_responses", "decode_response", "parse_body"]
