"""
Shared GET pipeline for every api.weather.gov endpoint.

One request per call: build the URL, query string and headers from the
``Configuration``, send it on the configured ``httpx.AsyncClient``, then map
the response onto a model or an ``NwsError``.

Wire conventions of the API that callers rely on:
  - list query parameters go out once, comma-joined (``zone=A,B,C``);
  - path parameters are fully percent-encoded (``39.74%2C-97.08``);
  - any status outside 4xx/5xx is treated as success.
"""

import json
import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from noaa_weather.configuration import Configuration
from noaa_weather.errors import (
    NwsDeserializationError,
    NwsResponseError,
    NwsTransportError,
    NwsUnexpectedContentTypeError,
    NwsXmlError,
)
from noaa_weather.models.problem import parse_endpoint_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

QueryValue = Union[None, str, int, float, bool, Enum, date, datetime, Sequence[Any]]

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class ContentType(str, Enum):
    JSON = "json"
    TEXT = "text"
    XML = "xml"
    UNSUPPORTED = "unsupported"


def classify_content_type(content_type: Optional[str]) -> ContentType:
    value = (content_type or DEFAULT_CONTENT_TYPE).lower()
    if value.startswith("application") and "json" in value:
        return ContentType.JSON
    if value.startswith("text") and "plain" in value:
        return ContentType.TEXT
    if value.startswith("application") and "xml" in value:
        return ContentType.XML
    return ContentType.UNSUPPORTED


def encode_path_param(value: Any) -> str:
    """Percent-encode one path segment, reserved characters included."""
    return quote(_render(value), safe="")


def _render(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def build_query(params: Optional[Mapping[str, QueryValue]]) -> List[Tuple[str, str]]:
    """Drop unset values, comma-join lists into a single occurrence."""
    query = []
    for name, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            if not value:
                continue
            query.append((name, ",".join(_render(v) for v in value)))
        else:
            query.append((name, _render(value)))
    return query


def build_headers(
    configuration: Configuration,
    extra: Optional[Mapping[str, Optional[Sequence[str]]]] = None,
    send_api_key: bool = False,
) -> httpx.Headers:
    headers = []
    if configuration.user_agent is not None:
        headers.append(("User-Agent", configuration.user_agent))
    # The API key rides along as a second User-Agent value on the endpoint
    # groups that accept one; api.weather.gov reads no separate auth header.
    if send_api_key and configuration.api_key is not None:
        headers.append(("User-Agent", configuration.api_key.header_value))
    for name, values in (extra or {}).items():
        if values:
            headers.append((name, ",".join(_render(v) for v in values)))
    return httpx.Headers(headers)


def _target_name(model: Optional[Type[Any]]) -> str:
    if model is None:
        return "Any"
    return getattr(model, "__name__", repr(model))


async def fetch(
    configuration: Configuration,
    path: str,
    model: Optional[Type[ModelT]],
    *,
    query: Optional[Mapping[str, QueryValue]] = None,
    headers: Optional[Mapping[str, Optional[Sequence[str]]]] = None,
    send_api_key: bool = False,
    xml_decoder: Optional[Callable[[str], Any]] = None,
) -> Any:
    """GET ``path`` and decode the body into ``model``.

    ``model=None`` returns the decoded JSON as plain Python data. An
    ``xml_decoder`` makes XML bodies acceptable (it must raise
    ``NwsXmlError`` on bad input).

    Raises:
        NwsTransportError: the request could not be completed.
        NwsResponseError: 4xx/5xx; ``entity`` holds the parsed error body.
        NwsUnexpectedContentTypeError: success with a body we cannot decode.
        NwsDeserializationError: success body does not fit ``model``.
    """
    url = configuration.base_url.rstrip("/") + path
    params = build_query(query)
    request_headers = build_headers(configuration, headers, send_api_key)

    logger.debug("GET %s params=%s", url, params)
    try:
        response = await configuration.client.get(url, params=params, headers=request_headers)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NwsTransportError(f"GET {url} failed: {exc}") from exc

    logger.debug("GET %s -> %s", url, response.status_code)

    if response.is_client_error or response.is_server_error:
        content = response.text
        raise NwsResponseError(response.status_code, content, parse_endpoint_error(content))

    content_type = response.headers.get("content-type", DEFAULT_CONTENT_TYPE)
    kind = classify_content_type(content_type)
    target = _target_name(model)

    if kind is ContentType.JSON:
        return _decode_json(response.text, model, target)
    if kind is ContentType.XML and xml_decoder is not None:
        try:
            return xml_decoder(response.text)
        except ValidationError as exc:
            raise NwsXmlError(str(exc), target=target) from exc
    raise NwsUnexpectedContentTypeError(content_type, target)


def _decode_json(text: str, model: Optional[Type[ModelT]], target: str) -> Any:
    try:
        if model is None:
            return json.loads(text)
        return model.model_validate_json(text)
    except (ValidationError, ValueError) as exc:
        raise NwsDeserializationError(str(exc), target=target) from exc


__all__ = [
    "ContentType",
    "classify_content_type",
    "encode_path_param",
    "build_query",
    "build_headers",
    "fetch",
]
