from __future__ import annotations

from typing import Protocol, Any


class ResponseHandler(Protocol):
    """
    Port for turning a parsed JSON node into a typed record.

    Implementations live in the adapters layer (e.g. the Reddit JSON decoder).
    """

    def __call__(self, node: Any) -> Any:
        """
        Decode one already-parsed response body.

        Should:
          - default missing scalar fields to their zero value
        Raises:
          - MalformedResponseError when the node can't be traversed
        """
        ...
