"""Send encoded requests and turn raw responses into payloads or typed errors."""
from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import pydantic

from .context import Context
from .encoding import WireRequest
from .exceptions import ApiError, DecodeError
from .transport import Transport, TransportResponse

M = TypeVar("M", bound=pydantic.BaseModel)

logger = logging.getLogger(__name__)


def invoke(context: Context, wire: WireRequest, transport: Transport) -> Any:
    """Perform one round trip and return the decoded JSON payload.

    Management contexts attach ``Authorization: Bearer <token>``; the
    authentication endpoints carry their credentials in the body and send
    no Authorization header.

    Raises:
        TransportError: Propagated from the transport
        ApiError: On any non-2xx status
        DecodeError: If a 2xx body is not JSON
    """
    url = context.url(wire.path)

    logger.debug(f"{wire.method} {url}")
    resp = transport.execute(
        wire.method,
        url,
        headers=headers_for(context),
        params=wire.query or None,
        json=wire.body,
    )
    logger.debug(f"{wire.method} {url} -> {resp.status_code}")

    _handle_error(resp, url)
    return _decode_json(resp, url)


def _handle_error(resp: TransportResponse, endpoint: str) -> None:
    """Centralized error handling for HTTP responses.

    Raises:
        ApiError: If the status is not 2xx
    """
    if resp.ok:
        return
    message, error_code, body = _parse_error_body(resp)
    logger.warning(f"Auth0 API error [{resp.status_code}] {endpoint}: {error_code or message}")
    raise ApiError(resp.status_code, message, endpoint, error_code=error_code, body=body)


def _parse_error_body(resp: TransportResponse) -> Tuple[str, Optional[str], Any]:
    """Extract message and code from an error body when it is JSON.

    Authentication API errors look like ``{"error", "error_description"}``,
    Management API errors like ``{"statusCode", "error", "message", "errorCode"}``.
    """
    try:
        body = json.loads(resp.body)
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}", None, None

    if not isinstance(body, dict):
        return resp.text, None, body

    message = body.get("error_description") or body.get("message") or body.get("error") or resp.text
    error_code = body.get("errorCode") or body.get("error")
    return str(message), error_code, body


def _decode_json(resp: TransportResponse, endpoint: str) -> Any:
    if not resp.body:
        raise DecodeError("Empty response body", endpoint)
    try:
        return json.loads(resp.body)
    except ValueError as exc:
        raise DecodeError(f"Response body is not valid JSON: {exc}", endpoint) from exc


def decode_model(model: Type[M], payload: Any, endpoint: str) -> M:
    """Validate a payload against a response model.

    Raises:
        DecodeError: If the payload does not match the model's shape
    """
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"Unexpected {model.__name__} payload: {exc}", endpoint) from exc


def headers_for(context: Context) -> Dict[str, str]:
    """Headers attached to every request built from ``context``."""
    headers = {"Accept": "application/json"}
    authorization = context.authorization_header()
    if authorization:
        headers["Authorization"] = authorization
    return headers
