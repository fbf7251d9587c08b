from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .constants import ThingKind
from .value_objects import thing_kind_of


@dataclass(frozen=True, slots=True)
class TokenRefreshResult:
    """
    Access/refresh token pair returned by the OAuth token endpoint.
    """
    access_token: str = ""
    refresh_token: str = ""


@dataclass(frozen=True, slots=True)
class IdentityResult:
    """
    The authenticated account, as returned by `/api/v1/me`.
    """
    id: str = ""
    name: str = ""

    def normalized_username(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Item:
    """
    One Reddit "thing" (comment, message, link, ...).

    A single flat record carries the union of the fields used by every kind.
    Fields that don't apply to a given kind stay at their zero value; none of
    them is required for any kind.
    """
    kind: str = ""
    id: str = ""
    type: str = ""
    author: str = ""
    subject: str = ""
    body: str = ""
    created_at: float = 0.0
    context: str = ""
    parent_id: str = ""
    link_title: str = ""
    destination: str = ""
    subreddit: str = ""

    def full_name(self) -> str:
        return f"{self.kind}_{self.id}"

    @property
    def thing_kind(self) -> Optional[ThingKind]:
        return thing_kind_of(self.kind)


@dataclass(frozen=True, slots=True)
class ItemPage:
    """
    A listing page: items in API order plus the pagination cursors.

    A page is truthy when it has children or either cursor, so an empty page
    that still points somewhere doesn't end a pagination loop.
    """
    count: int = 0
    children: Tuple[Item, ...] = ()
    after: str = ""
    before: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        if self.count != len(self.children):
            raise ValueError(
                f"Listing count {self.count} does not match {len(self.children)} children"
            )

    # ---- read-only helpers ------------------------------------------------

    @property
    def has_next(self) -> bool:
        return bool(self.after)

    @property
    def has_previous(self) -> bool:
        return bool(self.before)

    def __bool__(self) -> bool:
        return bool(self.children) or self.has_next or self.has_previous

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Item]:
        return iter(self.children)


EMPTY_ITEM_PAGE = ItemPage()
