# src/pkg_reddit/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass

from .constants import ThingKind


@dataclass(frozen=True, slots=True)
class FullName:
    """
    Reddit's canonical object identifier, e.g. `t1_abc123`.

    The kind prefix is kept as a raw string so unknown kinds still round-trip.
    """
    kind: str
    id: str

    @classmethod
    def parse(cls, value: str) -> FullName:
        kind, sep, id_ = value.partition("_")
        if not sep:
            raise ValueError(f"Invalid full name: {value!r}")
        return cls(kind=kind, id=id_)

    @property
    def thing_kind(self) -> ThingKind | None:
        return thing_kind_of(self.kind)

    def __str__(self) -> str:
        return f"{self.kind}_{self.id}"


def thing_kind_of(kind: str) -> ThingKind | None:
    """Map a raw kind prefix to ThingKind, or None when Reddit added one we don't know."""
    try:
        return ThingKind(kind)
    except ValueError:
        return None
