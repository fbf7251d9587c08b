class RedditResponseError(Exception):
    """Base class for errors raised while handling Reddit responses."""
    pass


class MalformedResponseError(RedditResponseError):
    """Raised when a payload has a shape the decoder cannot traverse."""
    pass


class ApiError(RedditResponseError):
    """
    Error reported by the remote API.

    `message` and `code` come from the response body, `status_code` is the
    HTTP status observed by the transport layer.
    """

    __slots__ = ("_message", "_code", "_status_code")

    def __init__(self, message: str = "", code: int = 0, status_code: int = 0) -> None:
        super().__init__(message, code, status_code)
        self._message = message
        self._code = code
        self._status_code = status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int:
        return self._code

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def is_client_error(self) -> bool:
        return 400 <= self._status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self._status_code < 600

    def __str__(self) -> str:
        return f"{self._message} ({self._code})"

    def __repr__(self) -> str:
        return (
            f"ApiError(message={self._message!r}, code={self._code}, "
            f"status_code={self._status_code})"
        )
