from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from ...domain.entities import EMPTY_ITEM_PAGE, IdentityResult, Item, ItemPage, TokenRefreshResult
from ...domain.exceptions import ApiError, MalformedResponseError


# ---------------------------------------------------------------------- #
# Typed field accessors
#
# A key that is missing, or holds a value of the wrong JSON type, reads as
# the zero value. Reads on a node that isn't an object do the same.
# ---------------------------------------------------------------------- #


def _get(node: Any, key: str) -> Any:
    if not isinstance(node, Mapping):
        return None
    return node.get(key)


def _get_str(node: Any, key: str) -> str:
    value = _get(node, key)
    return value if isinstance(value, str) else ""


def _get_int(node: Any, key: str) -> int:
    value = _get(node, key)
    # JSON floats (`1e3`, `401.0`) are not integers, even when whole-valued.
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def _get_float(node: Any, key: str) -> float:
    value = _get(node, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        return float(value)
    except OverflowError:
        return 0.0


def _get_array(node: Any, key: str) -> List[Any]:
    value = _get(node, key)
    return value if isinstance(value, list) else []


def _get_data(node: Any, what: str) -> Mapping[str, Any]:
    data = _get(node, "data")
    if not isinstance(data, Mapping):
        raise MalformedResponseError(f"{what} payload has no 'data' object")
    return data


# ---------------------------------------------------------------------- #
# Decoders
# ---------------------------------------------------------------------- #


def decode_error(node: Any, status_code: int) -> ApiError:
    """
    Build an ApiError from an error body.

    `status_code` comes from the transport; it is never read from the body.
    """
    return ApiError(
        message=_get_str(node, "message"),
        code=_get_int(node, "error"),
        status_code=status_code,
    )


def decode_token_refresh(node: Any) -> TokenRefreshResult:
    return TokenRefreshResult(
        access_token=_get_str(node, "access_token"),
        refresh_token=_get_str(node, "refresh_token"),
    )


def decode_identity(node: Any) -> IdentityResult:
    return IdentityResult(
        id=_get_str(node, "id"),
        name=_get_str(node, "name"),
    )


def decode_item(node: Any) -> Item:
    """
    Decode one `{"kind": ..., "data": {...}}` thing.

    Raises:
        MalformedResponseError if `data` is missing or not an object.
    """
    kind = _get_str(node, "kind")
    data = _get_data(node, "Thing")

    return Item(
        kind=kind,
        id=_get_str(data, "id"),
        type=_get_str(data, "type"),
        author=_get_str(data, "author"),
        subject=_get_str(data, "subject"),
        body=_get_str(data, "body"),
        created_at=_get_float(data, "created_utc"),
        context=_get_str(data, "context"),
        parent_id=_get_str(data, "parent_id"),
        link_title=_get_str(data, "link_title"),
        destination=_get_str(data, "dest"),
        subreddit=_get_str(data, "subreddit"),
    )


def decode_item_page(node: Any) -> ItemPage:
    """
    Decode a Listing. Children keep the order they have in the payload.

    Raises:
        MalformedResponseError if `data` (or a child's `data`) is missing or
        not an object.
    """
    data = _get_data(node, "Listing")
    children = _get_array(data, "children")

    after = _get_str(data, "after")
    before = _get_str(data, "before")
    count = len(children)

    if count == 0:
        if not after and not before:
            return EMPTY_ITEM_PAGE
        return ItemPage(after=after, before=before)

    return ItemPage(
        count=count,
        children=tuple(decode_item(child) for child in children),
        after=after,
        before=before,
    )


# Handlers by response name, for transport code that picks one per endpoint.
RESPONSE_HANDLERS: Dict[str, Callable[[Any], Any]] = {
    "refresh_token": decode_token_refresh,
    "identity": decode_identity,
    "item": decode_item,
    "listing": decode_item_page,
}


def get_response_handler(name: str) -> Callable[[Any], Any]:
    handler: Optional[Callable[[Any], Any]] = RESPONSE_HANDLERS.get(name)
    if handler is None:
        raise KeyError(f"Unknown response type: {name!r}")
    return handler
