# cardsmith/domain/errors.py
from typing import Optional


class CardsmithError(Exception):
    """Base for errors that map onto an HTTP status at the delivery layer."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CardsmithError):
    # Missing and not-owned are reported the same way.
    status_code = 404
    error = "Not Found"


class PermissionDeniedError(CardsmithError):
    status_code = 403
    error = "Forbidden"


class ConflictError(CardsmithError):
    status_code = 409
    error = "Conflict"


class AuthenticationError(CardsmithError):
    status_code = 401
    error = "Unauthorized"


class MalformedDataError(CardsmithError):
    status_code = 422
    error = "Malformed Data"


class InvalidRequestError(CardsmithError):
    status_code = 400
    error = "Bad Request"


class ExportValidationError(InvalidRequestError):
    pass


class UpstreamRenderError(CardsmithError):
    """The rendering service answered with an error or not at all."""

    status_code = 502
    error = "Upstream Render Failure"

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class RenderTimeoutError(UpstreamRenderError):
    status_code = 504
    error = "Upstream Render Timeout"


class RenderConnectionError(UpstreamRenderError):
    error = "Upstream Render Unavailable"
