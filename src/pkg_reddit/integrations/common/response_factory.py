from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...adapters.reddit_json.decoder import (
    decode_identity,
    decode_item,
    decode_item_page,
    decode_token_refresh,
)
from ...application.use_cases.handle_response import HandleResponseUseCase
from ...domain.entities import IdentityResult, Item, ItemPage, TokenRefreshResult
from ...settings import ResponseSettings


@dataclass(slots=True)
class RedditResponses:
    """
    Framework-agnostic response facade.

    Transport integrations (httpx, ...) adapt this to their own response
    objects.
    """

    refresh_token_use_case: HandleResponseUseCase
    identity_use_case: HandleResponseUseCase
    item_use_case: HandleResponseUseCase
    listing_use_case: HandleResponseUseCase

    # --- Core operations --------------------------------------------------

    def refresh_token(self, node: Any, status_code: int) -> TokenRefreshResult:
        """Token endpoint body -> TokenRefreshResult (or raise ApiError)."""
        return self.refresh_token_use_case.execute(node, status_code)

    def identity(self, node: Any, status_code: int) -> IdentityResult:
        """`/api/v1/me` body -> IdentityResult (or raise ApiError)."""
        return self.identity_use_case.execute(node, status_code)

    def item(self, node: Any, status_code: int) -> Item:
        return self.item_use_case.execute(node, status_code)

    def listing(self, node: Any, status_code: int) -> ItemPage:
        return self.listing_use_case.execute(node, status_code)


def create_reddit_responses(settings: ResponseSettings | None = None) -> RedditResponses:
    """
    High-level factory: settings -> RedditResponses.

    - wires one HandleResponseUseCase per record type
    - all of them share the same settings
    """
    settings = settings or ResponseSettings()

    return RedditResponses(
        refresh_token_use_case=HandleResponseUseCase(decode_token_refresh, settings),
        identity_use_case=HandleResponseUseCase(decode_identity, settings),
        item_use_case=HandleResponseUseCase(decode_item, settings),
        listing_use_case=HandleResponseUseCase(decode_item_page, settings),
    )
