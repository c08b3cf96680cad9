"""HTTP client construction and authenticated request dispatch."""

import logging
import os
from typing import Optional

import httpx

from ..models.connection import Connection
from ..services.exceptions import OP_HTTP_REQUEST, NetworkError
from .constants import DEFAULT_TIMEOUT, HTTP_TIMEOUT_ENV

logger = logging.getLogger(__name__)


def get_timeout() -> float:
    """Request timeout in seconds, overridable through the environment."""
    value = os.environ.get(HTTP_TIMEOUT_ENV)
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid {HTTP_TIMEOUT_ENV} value: {value}")
        return DEFAULT_TIMEOUT


def create_client(
    transport: Optional[httpx.BaseTransport] = None, timeout: Optional[float] = None
) -> httpx.Client:
    """Create the HTTP client shared by a single CLI invocation.

    Args:
        transport: Optional transport, used by tests to stub the network
        timeout: Timeout in seconds, defaults to get_timeout()
    """
    if timeout is None:
        timeout = get_timeout()
    return httpx.Client(timeout=timeout, transport=transport)


def dispatch_http_request(
    client: httpx.Client, request: httpx.Request, connection: Connection
) -> httpx.Response:
    """Send a request to a Codewind connection.

    Adds the connection's bearer token when it has one. Non-2xx responses
    are returned to the caller, only transport failures raise.

    Raises:
        NetworkError: If the request could not be completed
    """
    if connection.access_token:
        request.headers["Authorization"] = f"Bearer {connection.access_token}"

    logger.debug(f"{request.method} {request.url} (connection {connection.id})")
    try:
        response = client.send(request)
    except httpx.HTTPError as e:
        raise NetworkError(f"Request to {request.url} failed: {e}", OP_HTTP_REQUEST) from e

    logger.debug(f"{request.method} {request.url} -> {response.status_code}")
    return response
