"""Exceptions raised by the NWS client."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from noaa_weather.models.problem import EndpointError, ProblemDetail


class NwsError(Exception):
    """Base exception for all NWS client errors."""
    pass


class CodeParseError(NwsError, ValueError):
    """A string is not a token of the requested code family."""

    def __init__(self, value: str, code_type: str) -> None:
        super().__init__(f"'{value}' is not a valid {code_type}")
        self.value = value
        self.code_type = code_type


class NwsTransportError(NwsError):
    """The request could not be sent or the connection failed."""
    pass


class NwsDeserializationError(NwsError):
    """A success body did not match the expected shape."""

    def __init__(self, message: str, *, target: Optional[str] = None) -> None:
        super().__init__(message)
        self.target = target


class NwsXmlError(NwsDeserializationError):
    """An XML body (terminal aerodrome forecast) could not be read."""
    pass


class NwsUnexpectedContentTypeError(NwsError):
    """Success status, but a content type the endpoint cannot decode."""

    def __init__(self, content_type: str, target: str) -> None:
        super().__init__(
            f"Received `{content_type}` content type response that cannot be converted to `{target}`"
        )
        self.content_type = content_type
        self.target = target


class NwsResponseError(NwsError):
    """The API answered with a 4xx or 5xx status.

    ``entity`` is the parsed error body when it was JSON, otherwise ``None``.
    Callers must not assume it is present.
    """

    def __init__(
        self,
        status_code: int,
        content: str,
        entity: Optional["EndpointError"] = None,
    ) -> None:
        super().__init__(content or f"HTTP {status_code}")
        self.status_code = status_code
        self.content = content
        self.entity = entity

    @property
    def problem(self) -> Optional["ProblemDetail"]:
        from noaa_weather.models.problem import ProblemDetail

        if isinstance(self.entity, ProblemDetail):
            return self.entity
        return None

    def __repr__(self) -> str:
        return f"NwsResponseError(status_code={self.status_code!r}, entity={self.entity!r})"


__all__ = [
    "NwsError",
    "CodeParseError",
    "NwsTransportError",
    "NwsDeserializationError",
    "NwsXmlError",
    "NwsUnexpectedContentTypeError",
    "NwsResponseError",
]
