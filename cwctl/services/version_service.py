"""Version queries against the Codewind containers."""

import logging

import httpx
from pydantic import ValidationError

from .. import __version__
from ..core.constants import (
    GATEKEEPER_ENVIRONMENT_PATH,
    PERFORMANCE_ENVIRONMENT_PATH,
    PFE_ENVIRONMENT_PATH,
)
from ..core.http_client import dispatch_http_request
from ..models.connection import Connection
from ..models.version import CodewindVersion, ContainerVersions
from .exceptions import OP_VERSION, DecodeError

logger = logging.getLogger(__name__)


def get_container_versions(connection: Connection, client: httpx.Client) -> ContainerVersions:
    """Get the versions of cwctl and each Codewind container.

    The containers are queried one at a time; the first hard failure is
    raised and the remaining containers are not queried.

    Raises:
        NetworkError: If a container could not be reached
        DecodeError: If a container returned malformed JSON
    """
    pfe_version = get_pfe_version(connection, client)
    gatekeeper_version = get_gatekeeper_version(connection, client)
    performance_version = get_performance_version(connection, client)

    return ContainerVersions(
        cwctl_version=__version__,
        pfe_version=pfe_version,
        gatekeeper_version=gatekeeper_version,
        performance_version=performance_version,
    )


def get_pfe_version(connection: Connection, client: httpx.Client) -> str:
    """Get the version of the PFE container behind a connection."""
    return _get_version_from_env_api(connection, client, PFE_ENVIRONMENT_PATH)


def get_gatekeeper_version(connection: Connection, client: httpx.Client) -> str:
    """Get the version of the Gatekeeper container behind a connection."""
    return _get_version_from_env_api(connection, client, GATEKEEPER_ENVIRONMENT_PATH)


def get_performance_version(connection: Connection, client: httpx.Client) -> str:
    """Get the version of the Performance container behind a connection."""
    return _get_version_from_env_api(connection, client, PERFORMANCE_ENVIRONMENT_PATH)


def _get_version_from_env_api(connection: Connection, client: httpx.Client, path: str) -> str:
    request = client.build_request("GET", connection.base_url + path)
    response = dispatch_http_request(client, request, connection)

    # Some deployments do not run every container
    if response.status_code != httpx.codes.OK:
        logger.info(f"No version available from {path} (HTTP {response.status_code})")
        return ""

    try:
        body = response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid version response from {path}: {e}", OP_VERSION) from e

    # A null envelope carries no version
    if body is None:
        return ""

    try:
        codewind_version = CodewindVersion.model_validate(body)
    except ValidationError as e:
        raise DecodeError(f"Invalid version response from {path}: {e}", OP_VERSION) from e

    return codewind_version.codewind_version or ""
