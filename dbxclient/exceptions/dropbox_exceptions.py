from typing import Any, Optional


class ApiError(Exception):
    """Base exception for every non-200 answer from the Dropbox API.

    String conversion yields the error summary sent by the server.
    """

    def __init__(
        self,
        error_summary: str,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> None:
        self.error_summary = error_summary
        self.status_code = status_code
        self.request_id = request_id
        super().__init__(self.error_summary)

    def __str__(self) -> str:
        return self.error_summary


class BadInputError(ApiError):
    """Raised on 400; the summary is the raw response body"""


class EndpointError(ApiError):
    """Raised on 409 with the route specific error union decoded"""

    def __init__(
        self,
        error_summary: str,
        route: str,
        error: Any = None,
        user_message: Optional[str] = None,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> None:
        super().__init__(error_summary, status_code, request_id)
        self.route = route
        self.error = error
        self.user_message = user_message

    def __repr__(self) -> str:
        return f"EndpointError(route={self.route!r}, error={self.error!r})"


class AuthApiError(ApiError):
    """Raised on 401; `error` is an auth.AuthError"""

    def __init__(self, error_summary: str, error: Any = None, **kwargs) -> None:
        super().__init__(error_summary, **kwargs)
        self.error = error


class AccessApiError(ApiError):
    """Raised on 403; `error` is an auth.AccessError"""

    def __init__(self, error_summary: str, error: Any = None, **kwargs) -> None:
        super().__init__(error_summary, **kwargs)
        self.error = error


class RateLimitApiError(ApiError):
    """Raised on 429; `error` is an auth.RateLimitError"""

    def __init__(self, error_summary: str, error: Any = None, **kwargs) -> None:
        super().__init__(error_summary, **kwargs)
        self.error = error

    @property
    def retry_after(self) -> Optional[int]:
        return getattr(self.error, "retry_after", None)


class InternalServerError(ApiError):
    """Raised on 5xx"""
