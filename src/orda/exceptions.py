"""Exception hierarchy for the orda client.

Exception tree:
    OrdaError
    +-- TransportError        (network unreachable, TLS failure, timeout)
    +-- DecodeError           (body is not JSON or does not match the schema)
        +-- UnexpectedStatus  (non-2xx HTTP response)
"""

from typing import Any, Optional


class OrdaError(Exception):
    """Base exception for all orda client errors."""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class TransportError(OrdaError):
    """The request never produced a response.

    Raised from the underlying ``httpx.HTTPError``. Not retried here --
    callers own their retry policy.
    """

    pass


class DecodeError(OrdaError):
    """The server answered, but not with what the schema expects.

    ``path`` is the dotted location of the first failing field, using the
    keys as they appear on the wire (e.g. ``"0.steps.1.age"``). It is
    ``None`` when the body is not valid JSON at all. ``errors`` holds the
    full pydantic error list for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        errors: Optional[list[dict[str, Any]]] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.path = path
        self.errors = errors or []
        super().__init__(message, url=url, status_code=status_code)


class UnexpectedStatus(DecodeError):
    """HTTP status outside 2xx.

    Distinct from DecodeError so callers can tell a 404 for an unknown
    build id apart from a malformed 200 body.
    """

    pass
