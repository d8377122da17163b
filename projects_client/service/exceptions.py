"""
Transport errors

    TransportError
    +-- RequestFailedError    the request never got an HTTP answer
    +-- HTTPStatusError       non-2xx answer
    |   +-- UnauthorizedError 401
    +-- ApiError              2xx answer whose envelope code is not 0
"""

from typing import Any, Optional


class TransportError(Exception):
    """Base class for every failure raised by the shared transport"""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class RequestFailedError(TransportError):
    pass


class HTTPStatusError(TransportError):
    pass


class UnauthorizedError(HTTPStatusError):
    pass


class ApiError(TransportError):
    """The backend answered, but its result envelope reports a failure"""

    def __init__(self, code: int, msg: str, status_code: Optional[int] = None):
        super().__init__(f"[{code}] {msg}", status_code=status_code, detail=msg)
        self.code = code
        self.msg = msg
