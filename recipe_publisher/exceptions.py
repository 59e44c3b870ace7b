from typing import Optional


class PublishError(Exception):
    """Base for every terminal failure of a publish request."""

    status_code = 500
    code = "server-error"

    def __init__(self, detail: Optional[str] = None, *, code: Optional[str] = None):
        super().__init__(detail or code or self.code)
        self.detail = detail
        if code:
            self.code = code

    def to_body(self) -> dict:
        body = {"error": self.code}
        if self.detail:
            body["detail"] = self.detail
        return body


class Unauthorized(PublishError):
    """Missing or wrong admin password"""
    status_code = 401
    code = "unauthorized"


class ForbiddenOrigin(PublishError):
    """Origin not on the configured allowlist"""
    status_code = 403
    code = "forbidden-origin"


class BadInput(PublishError):
    """Empty or malformed payload"""
    status_code = 400
    code = "no-recipes"


class Misconfigured(PublishError):
    """Store coordinates or token missing"""
    status_code = 500
    code = "missing-github-config"


class ReadFailed(PublishError):
    """Fetching the current document failed (anything but 404)"""
    status_code = 500
    code = "github-read-failed"


class WriteFailed(PublishError):
    """Commit rejected or errored, including SHA conflicts"""
    status_code = 500
    code = "github-write-failed"


class InternalError(PublishError):
    """Anything uncaught"""
    status_code = 500
    code = "server-error"
