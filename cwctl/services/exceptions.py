"""Custom exceptions for service layer.

Every error carries an operation tag (``op``) naming the step that failed
and a human readable description (``desc``).
"""

from typing import Optional

# Operation tags
OP_CREATE_PROJECT = "proj_create"
OP_VALIDATE_PROJECT = "proj_validate"
OP_WRITE_SETTINGS = "proj_settings"
OP_INVALID_CREDENTIALS = "invalid_credentials"
OP_DOWNLOAD_TEMPLATE = "proj_download"
OP_VERSION = "version"
OP_HTTP_REQUEST = "sec_request"
OP_CONNECTION = "connection"

# Descriptions
TEXT_NO_PROJECT_PATH = "Project path not given"
TEXT_PROJECT_PATH_DOES_NOT_EXIST = "Project does not exist at given path"
TEXT_PROJECT_PATH_NON_EMPTY = "Non empty directory provided"
TEXT_LEGACY_SETTINGS_NOT_FOUND = "Legacy settings file does not exist"


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    def __init__(self, desc: str, op: Optional[str] = None):
        super().__init__(desc)
        self.desc = desc
        self.op = op

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.op == other.op
            and self.desc == other.desc
        )

    def __hash__(self):
        return hash((type(self), self.op, self.desc))


class ProjectError(ServiceError):
    """Exception raised for project operations."""

    pass


class EmptyPathError(ProjectError):
    """Exception raised when no project path was given."""

    def __init__(self, op: str = OP_CREATE_PROJECT):
        super().__init__(TEXT_NO_PROJECT_PATH, op)


class PathNotFoundError(ProjectError):
    """Exception raised when a path does not exist on disk."""

    def __init__(self, desc: str = TEXT_PROJECT_PATH_DOES_NOT_EXIST, op: str = OP_CREATE_PROJECT):
        super().__init__(desc, op)


class DirectoryNotEmptyError(ProjectError):
    """Exception raised when a target directory already has entries."""

    def __init__(self, op: str = OP_CREATE_PROJECT):
        super().__init__(TEXT_PROJECT_PATH_NON_EMPTY, op)


class InvalidCredentialsError(ProjectError):
    """Exception raised when a template host rejects the given credentials."""

    def __init__(self, desc: str = "Unauthorized"):
        super().__init__(desc, OP_INVALID_CREDENTIALS)


class RequestError(ServiceError):
    """Exception raised for HTTP requests against Codewind services."""

    pass


class NetworkError(RequestError):
    """Exception raised when a request could not complete."""

    pass


class DecodeError(RequestError):
    """Exception raised when a response body is not the expected JSON."""

    pass


class ConfigError(ServiceError):
    """Exception raised for cwctl configuration problems."""

    pass


class ConnectionNotFoundError(ConfigError):
    """Exception raised when a connection ID is not configured."""

    def __init__(self, conid: str):
        super().__init__(f"Connection '{conid}' not found", OP_CONNECTION)
        self.conid = conid
