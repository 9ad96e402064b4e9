"""Exception hierarchy for the Guardian content API client.

Callers can branch on "the request was rejected" (:class:`ApiError`) versus
"the service could not be reached or understood" (:class:`TransportError`,
:class:`DecodeError`). Every error is terminal for the call that raised it.
"""

__all__ = [
    "AletheiaError",
    "TransportError",
    "DecodeError",
    "MissingParameterError",
    "ApiError",
]


class AletheiaError(Exception):
    """Base exception for all client failures."""


class TransportError(AletheiaError):
    """Raised when the HTTP request could not be completed."""


class DecodeError(AletheiaError):
    """Raised when the response body does not match the expected JSON shape."""


class MissingParameterError(AletheiaError):
    """Raised before dispatch when a required query parameter is unset."""

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Missing query parameter: {parameter}")
        self.parameter = parameter


class ApiError(AletheiaError):
    """Raised when the API itself reports a failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(f"API error: {message}")
        self.message = message
        self.status_code = status_code
