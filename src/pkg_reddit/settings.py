from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ResponseSettings:
    """
    Knobs for turning transport responses into records or ApiErrors.

    Host code decides how to construct this (env, config file, etc.).
    """
    # Statuses at or above this are decoded as error bodies.
    error_status_min: int = 400

    def is_error_status(self, status_code: int) -> bool:
        return status_code >= self.error_status_min
