"""Service layer for Codewind projects and containers.

Service modules are imported directly (``cwctl.services.project_service``);
only the exceptions are re-exported here.
"""

from .exceptions import (
    ServiceError,
    ProjectError,
    EmptyPathError,
    PathNotFoundError,
    DirectoryNotEmptyError,
    InvalidCredentialsError,
    RequestError,
    NetworkError,
    DecodeError,
    ConfigError,
    ConnectionNotFoundError,
)

__all__ = [
    "ServiceError",
    "ProjectError",
    "EmptyPathError",
    "PathNotFoundError",
    "DirectoryNotEmptyError",
    "InvalidCredentialsError",
    "RequestError",
    "NetworkError",
    "DecodeError",
    "ConfigError",
    "ConnectionNotFoundError",
]
