from typing import Optional


class ProxyError(Exception):
    """Base for failures that map onto a caller-facing JSON error envelope."""

    status_code: int = 500
    detail: Optional[str] = None


class UnauthorizedError(ProxyError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class MisconfigurationError(ProxyError):
    status_code = 500


class UpstreamError(ProxyError):
    def __init__(self, status_code: int, detail: str):
        super().__init__("Vimeo error")
        self.status_code = status_code
        self.detail = detail
