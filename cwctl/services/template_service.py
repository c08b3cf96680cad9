"""Template download service for creating new projects."""

import logging
import shutil
import tempfile
import zipfile
from pathlib import Path
from typing import Optional, Union

import httpx

from ..core.constants import DEFAULT_TEMPLATE_BRANCH, DOWNLOAD_CHUNK_SIZE, DOWNLOAD_TIMEOUT
from ..models.connection import GitCredentials
from ..models.project import DownloadResult
from .exceptions import (
    OP_DOWNLOAD_TEMPLATE,
    InvalidCredentialsError,
    NetworkError,
    ProjectError,
)
from .project_service import check_project_dir_is_empty

logger = logging.getLogger(__name__)


def template_archive_url(url: str, branch: str = DEFAULT_TEMPLATE_BRANCH) -> str:
    """Archive URL for a template repository.

    URLs that already point at a zip file are used as they are.
    """
    url = url.rstrip("/")
    if url.endswith(".zip"):
        return url
    if url.endswith(".git"):
        url = url[:-len(".git")]
    return f"{url}/archive/{branch}.zip"


def _auth_for(git_credentials: Optional[GitCredentials]) -> tuple[Optional[httpx.Auth], dict]:
    if git_credentials is None:
        return None, {}
    if git_credentials.personal_access_token:
        return None, {"Authorization": f"token {git_credentials.personal_access_token}"}
    if git_credentials.username:
        return httpx.BasicAuth(git_credentials.username, git_credentials.password or ""), {}
    return None, {}


def download_template(
    destination: Union[str, Path],
    url: str,
    git_credentials: Optional[GitCredentials] = None,
    client: Optional[httpx.Client] = None,
    branch: str = DEFAULT_TEMPLATE_BRANCH,
) -> DownloadResult:
    """Download a template repository and extract it into a new project.

    Args:
        destination: Directory to extract into; must be missing or empty
        url: Repository or archive URL
        git_credentials: Credentials for private repositories
        client: HTTP client to download with
        branch: Branch archive to fetch for repository URLs

    Returns:
        DownloadResult describing where the project was created

    Raises:
        EmptyPathError: If no destination was given
        DirectoryNotEmptyError: If the destination has entries
        InvalidCredentialsError: If the host answered 401
        NetworkError: If the download failed
        ProjectError: If the archive could not be extracted
    """
    check_project_dir_is_empty(destination)
    destination = Path(destination)

    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=DOWNLOAD_TIMEOUT)

    archive_url = template_archive_url(url, branch)
    auth, headers = _auth_for(git_credentials)

    with tempfile.TemporaryDirectory() as temp_dir:
        zip_path = Path(temp_dir) / "template.zip"
        try:
            logger.info(f"Downloading template from {archive_url}")
            with client.stream(
                "GET", archive_url, auth=auth, headers=headers, follow_redirects=True
            ) as response:
                if response.status_code == httpx.codes.UNAUTHORIZED:
                    raise InvalidCredentialsError(httpx.codes.get_reason_phrase(response.status_code))
                if response.status_code != httpx.codes.OK:
                    raise NetworkError(
                        f"Template download from {archive_url} failed with HTTP {response.status_code}",
                        OP_DOWNLOAD_TEMPLATE,
                    )
                with open(zip_path, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        f.write(chunk)
        except httpx.HTTPError as e:
            raise NetworkError(f"Template download from {archive_url} failed: {e}", OP_DOWNLOAD_TEMPLATE) from e
        finally:
            if owns_client:
                client.close()

        _extract_template(zip_path, destination)

    logger.info(f"Template extracted to {destination}")
    return DownloadResult(status_message=f"Project downloaded to {destination}")


def _extract_template(zip_path: Path, destination: Path) -> None:
    """Extract an archive, flattening a single top-level directory."""
    with tempfile.TemporaryDirectory() as extract_dir:
        extract_path = Path(extract_dir)
        try:
            with zipfile.ZipFile(zip_path) as zip_ref:
                zip_ref.extractall(extract_path)
        except zipfile.BadZipFile as e:
            raise ProjectError(f"Downloaded template is not a zip archive: {e}", OP_DOWNLOAD_TEMPLATE) from e

        source_dir = extract_path
        extracted_items = list(extract_path.iterdir())
        # GitHub archives wrap everything in <repo>-<branch>/
        if len(extracted_items) == 1 and extracted_items[0].is_dir():
            source_dir = extracted_items[0]

        destination.mkdir(parents=True, exist_ok=True)
        for item in source_dir.iterdir():
            shutil.move(str(item), str(destination / item.name))
