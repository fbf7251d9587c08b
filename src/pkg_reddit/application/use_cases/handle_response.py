from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ...adapters.reddit_json.decoder import decode_error
from ...domain.exceptions import MalformedResponseError
from ...domain.ports import ResponseHandler
from ...settings import ResponseSettings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HandleResponseUseCase:
    """
    Application use case:
    - Error statuses -> decode the body as an ApiError and raise it
    - Anything else -> decode the body with the response handler

    Transport-agnostic: callers hand in the parsed body and the status code.
    """

    handler: ResponseHandler
    settings: ResponseSettings = field(default_factory=ResponseSettings)

    def execute(self, node: Any, status_code: int) -> Any:
        """
        Decode a response body and return the handler's record.

        Raises:
            ApiError
            MalformedResponseError
        """
        if self.settings.is_error_status(status_code):
            error = decode_error(node, status_code)
            logger.debug("Remote API error %s (HTTP %d)", error, status_code)
            raise error

        try:
            return self.handler(node)
        except MalformedResponseError:
            raise
        except Exception as exc:
            raise MalformedResponseError(f"Response decoding failed: {exc}") from exc
