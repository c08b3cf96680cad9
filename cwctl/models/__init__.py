"""Models for cwctl."""

from .connection import Connection, ConnectionsFile, GitCredentials
from .project import (
    BuildType,
    DownloadResult,
    Language,
    ProjectInfo,
    ProjectResult,
    ValidationResponse,
)
from .settings import CWSettings, SettingsDefaults
from .version import CodewindVersion, ContainerVersions

__all__ = [
    'Connection',
    'ConnectionsFile',
    'GitCredentials',
    'BuildType',
    'DownloadResult',
    'Language',
    'ProjectInfo',
    'ProjectResult',
    'ValidationResponse',
    'CWSettings',
    'SettingsDefaults',
    'CodewindVersion',
    'ContainerVersions'
]
