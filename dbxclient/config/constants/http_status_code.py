from enum import Enum


class HttpStatusCode(Enum):
    """Constants for HTTP status codes the Dropbox API answers with"""

    # 2xx Success
    OK = 200
    SUCCESS = 200  # Alias for OK

    # 4xx Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429

    # 5xx Server Errors
    INTERNAL_SERVER_ERROR = 500
