"""
pkg_reddit

Typed response models for a Reddit API client: decodes parsed JSON bodies
(tokens, identity, things, listings, errors) into immutable records.
"""

__version__ = "0.1.0"

from .domain.entities import (
    EMPTY_ITEM_PAGE,
    IdentityResult,
    Item,
    ItemPage,
    TokenRefreshResult,
)
from .domain.constants import ThingKind
from .domain.exceptions import (
    ApiError,
    MalformedResponseError,
    RedditResponseError,
)
from .domain.value_objects import FullName
from .domain.ports import ResponseHandler

from .adapters.reddit_json.decoder import (
    RESPONSE_HANDLERS,
    decode_error,
    decode_identity,
    decode_item,
    decode_item_page,
    decode_token_refresh,
    get_response_handler,
)

from .application.use_cases.handle_response import HandleResponseUseCase
from .integrations.common.response_factory import RedditResponses, create_reddit_responses
from .settings import ResponseSettings

__all__ = [
    "__version__",
    # domain core
    "TokenRefreshResult",
    "IdentityResult",
    "Item",
    "ItemPage",
    "EMPTY_ITEM_PAGE",
    "ThingKind",
    "FullName",
    "ResponseHandler",
    # exceptions
    "RedditResponseError",
    "MalformedResponseError",
    "ApiError",
    # decoders
    "decode_error",
    "decode_token_refresh",
    "decode_identity",
    "decode_item",
    "decode_item_page",
    "RESPONSE_HANDLERS",
    "get_response_handler",
    # use cases / facade
    "HandleResponseUseCase",
    "RedditResponses",
    "create_reddit_responses",
    "ResponseSettings",
]
