from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..common.response_factory import RedditResponses
from ...application.use_cases.handle_response import HandleResponseUseCase
from ...domain.entities import IdentityResult, Item, ItemPage, TokenRefreshResult
from ...domain.exceptions import MalformedResponseError
from ...domain.ports import ResponseHandler
from ...settings import ResponseSettings

logger = logging.getLogger(__name__)


def parse_body(response: httpx.Response, settings: ResponseSettings) -> Any:
    """
    Parse the JSON body of an already-read response.

    An unparsable body on an error status reads as `{}`, so the caller still
    gets an ApiError carrying the transport status.
    """
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        if settings.is_error_status(response.status_code):
            logger.debug(
                "Non-JSON error body (HTTP %d): %s", response.status_code, exc
            )
            return {}
        raise MalformedResponseError(f"Response body is not valid JSON: {exc}") from exc


def decode_response(
    response: httpx.Response,
    handler: ResponseHandler,
    *,
    settings: ResponseSettings | None = None,
) -> Any:
    """
    Run a response handler over an httpx.Response.

    Raises:
        ApiError
        MalformedResponseError
    """
    settings = settings or ResponseSettings()
    node = parse_body(response, settings)
    return HandleResponseUseCase(handler, settings).execute(node, response.status_code)


@dataclass(slots=True)
class HttpxRedditResponses:
    """
    httpx integration for pkg_reddit, built on top of the
    framework-agnostic RedditResponses facade.
    """

    responses: RedditResponses
    settings: ResponseSettings

    def _node(self, response: httpx.Response) -> Any:
        return parse_body(response, self.settings)

    def refresh_token(self, response: httpx.Response) -> TokenRefreshResult:
        return self.responses.refresh_token(self._node(response), response.status_code)

    def identity(self, response: httpx.Response) -> IdentityResult:
        return self.responses.identity(self._node(response), response.status_code)

    def item(self, response: httpx.Response) -> Item:
        return self.responses.item(self._node(response), response.status_code)

    def listing(self, response: httpx.Response) -> ItemPage:
        return self.responses.listing(self._node(response), response.status_code)
