from __future__ import annotations

from typing import Any, ClassVar, Literal

ErrorKind = Literal["ConfigurationError", "ApiError"]


class PostcodeEuClientError(Exception):
    """Base client error.

    ``kind`` is a discriminant so callers can match on it instead of
    testing the exception class.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(PostcodeEuClientError):
    """Caller input rejected before any request was sent."""

    kind: ClassVar[ErrorKind] = "ConfigurationError"


class ApiError(PostcodeEuClientError):
    kind: ClassVar[ErrorKind] = "ApiError"

    def __init__(
            self,
            status_code: int,
            message: str,
            error_kind: str = "Unknown",
            raw_body: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_kind = error_kind
        self.raw_body = raw_body

    def __reduce__(self):
        return (type(self), (self.status_code, self.message, self.error_kind, self.raw_body))

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, error_kind={self.error_kind!r}, message={self.message!r})"
