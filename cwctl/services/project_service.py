"""Project checks, settings files and validation."""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from ..core.constants import (
    IGNORED_PATHS_PATH,
    LEGACY_SETTINGS_FILE_NAME,
    SETTINGS_FILE_NAME,
)
from ..core.http_client import dispatch_http_request
from ..models.connection import Connection
from ..models.project import BuildType, ProjectResult, ValidationResponse
from ..models.settings import CWSettings, SettingsDefaults
from ..utils.project_detector import determine_project_info
from .exceptions import (
    OP_VALIDATE_PROJECT,
    OP_WRITE_SETTINGS,
    TEXT_LEGACY_SETTINGS_NOT_FOUND,
    DecodeError,
    DirectoryNotEmptyError,
    EmptyPathError,
    NetworkError,
    PathNotFoundError,
    ProjectError,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _to_build_type(build_type: Union[str, BuildType], op: str) -> BuildType:
    try:
        return BuildType(build_type)
    except ValueError as e:
        raise ProjectError(f"Unknown build type: {build_type}", op) from e


def check_project_path_exists(project_path: PathLike) -> None:
    """Check that a project path was given and exists.

    Raises:
        EmptyPathError: If the path is empty
        PathNotFoundError: If nothing exists at the path
    """
    if project_path == "":
        raise EmptyPathError()
    if not os.path.exists(project_path):
        raise PathNotFoundError()


def check_project_dir_is_empty(project_path: PathLike) -> None:
    """Check that a directory is safe to extract a template into.

    A path that does not exist yet passes.

    Raises:
        EmptyPathError: If the path is empty
        DirectoryNotEmptyError: If the directory already has entries
    """
    if project_path == "":
        raise EmptyPathError()
    path = Path(project_path)
    if path.is_dir() and any(path.iterdir()):
        raise DirectoryNotEmptyError()
    if path.exists() and not path.is_dir():
        raise DirectoryNotEmptyError()


def build_default_settings(
    build_type: Union[str, BuildType], defaults: Optional[SettingsDefaults] = None
) -> CWSettings:
    """Create the settings a new project starts with.

    The debug port is only set for build types that can be debugged, and
    the Maven fields only for Maven builds.
    """
    defaults = defaults or SettingsDefaults()
    build_type = _to_build_type(build_type, OP_WRITE_SETTINGS)

    settings = CWSettings()
    if build_type.has_debug_port:
        settings.internal_debug_port = defaults.internal_debug_port
    if build_type.uses_maven:
        settings.maven_profiles = list(defaults.maven_profiles)
        settings.maven_properties = list(defaults.maven_properties)
    return settings


def ignored_paths_url(connection: Connection, build_type: Union[str, BuildType]) -> str:
    """URL listing the paths the server ignores for a build type."""
    query = urlencode({"projectType": _to_build_type(build_type, OP_WRITE_SETTINGS).value})
    return f"{connection.base_url}{IGNORED_PATHS_PATH}?{query}"


def get_ignored_paths(client: httpx.Client, connection: Connection, remote_url: str) -> List[str]:
    """Fetch the ignored path globs for a project type.

    Raises:
        NetworkError: If the request fails or returns an unexpected status
        DecodeError: If the body is not a JSON list of strings
    """
    request = client.build_request("GET", remote_url)
    response = dispatch_http_request(client, request, connection)
    if response.status_code != httpx.codes.OK:
        raise NetworkError(
            f"Could not get ignored paths from {remote_url}: HTTP {response.status_code}",
            OP_WRITE_SETTINGS,
        )

    try:
        ignored_paths = response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid ignored paths response: {e}", OP_WRITE_SETTINGS) from e

    if not isinstance(ignored_paths, list) or not all(isinstance(p, str) for p in ignored_paths):
        raise DecodeError("Ignored paths response is not a list of strings", OP_WRITE_SETTINGS)
    return ignored_paths


def write_new_cw_settings(
    client: httpx.Client,
    connection: Connection,
    remote_url: str,
    settings_path: PathLike,
    build_type: Union[str, BuildType],
    defaults: Optional[SettingsDefaults] = None,
) -> CWSettings:
    """Write a fresh settings file, replacing any existing one.

    Args:
        client: HTTP client used to reach the server
        connection: Connection the project belongs to
        remote_url: Ignored paths endpoint
        settings_path: Path of the settings file to write
        build_type: Build type of the project
        defaults: Values for build-type specific fields

    Returns:
        The settings that were written

    Raises:
        NetworkError: If the ignored paths could not be fetched
        DecodeError: If the ignored paths response was malformed
        ProjectError: If the settings file could not be written
    """
    build_type = _to_build_type(build_type, OP_WRITE_SETTINGS)
    settings = build_default_settings(build_type, defaults)
    settings.ignored_paths = get_ignored_paths(client, connection, remote_url)

    settings_path = Path(settings_path)
    try:
        _atomic_write(settings_path, settings.to_json())
    except OSError as e:
        raise ProjectError(f"Could not write {settings_path}: {e}", OP_WRITE_SETTINGS) from e

    logger.info(f"Wrote settings for {build_type.value} project to {settings_path}")
    return settings


def read_cw_settings(settings_path: PathLike) -> CWSettings:
    """Load a settings file.

    Raises:
        PathNotFoundError: If the file does not exist
        DecodeError: If the file is not valid settings JSON
    """
    settings_path = Path(settings_path)
    if not settings_path.is_file():
        raise PathNotFoundError(f"Settings file {settings_path} does not exist", OP_WRITE_SETTINGS)
    try:
        return CWSettings.model_validate_json(settings_path.read_text())
    except ValidationError as e:
        raise DecodeError(f"Invalid settings file {settings_path}: {e}", OP_WRITE_SETTINGS) from e


def rename_legacy_settings(old_path: PathLike, new_path: PathLike) -> None:
    """Move a legacy settings file to the current name.

    Raises:
        PathNotFoundError: If the legacy file does not exist
        ProjectError: If the file could not be moved
    """
    if not os.path.exists(old_path):
        raise PathNotFoundError(TEXT_LEGACY_SETTINGS_NOT_FOUND, OP_WRITE_SETTINGS)
    try:
        os.replace(old_path, new_path)
    except OSError as e:
        raise ProjectError(f"Could not rename {old_path}: {e}", OP_WRITE_SETTINGS) from e
    logger.info(f"Renamed legacy settings {old_path} to {new_path}")


def validate_project(
    client: httpx.Client,
    connection: Connection,
    project_path: PathLike,
    build_type: Optional[Union[str, BuildType]] = None,
    defaults: Optional[SettingsDefaults] = None,
) -> ValidationResponse:
    """Detect a project's type and make sure it has a settings file.

    Legacy settings are migrated in preference to writing new ones.

    Args:
        build_type: Overrides the detected build type when given
    """
    try:
        check_project_path_exists(project_path)
    except ProjectError as e:
        e.op = OP_VALIDATE_PROJECT
        raise

    language, detected_build_type = determine_project_info(project_path)
    build_type = _to_build_type(build_type, OP_VALIDATE_PROJECT) if build_type else detected_build_type

    settings_path = Path(project_path) / SETTINGS_FILE_NAME
    legacy_path = Path(project_path) / LEGACY_SETTINGS_FILE_NAME
    if not settings_path.exists():
        if legacy_path.exists():
            rename_legacy_settings(legacy_path, settings_path)
        else:
            write_new_cw_settings(
                client,
                connection,
                ignored_paths_url(connection, build_type),
                settings_path,
                build_type,
                defaults,
            )

    return ValidationResponse(
        path=str(project_path),
        result=ProjectResult(language=language, build_type=build_type),
    )


def _atomic_write(path: Path, content: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

