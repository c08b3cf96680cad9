"""Project models."""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """Languages cwctl can recognise."""

    JAVA = "java"
    JAVASCRIPT = "javascript"
    SWIFT = "swift"
    PYTHON = "python"
    GO = "go"
    UNKNOWN = "unknown"


class BuildType(str, Enum):
    """Build types understood by the Codewind server."""

    LIBERTY = "liberty"
    SPRING = "spring"
    NODEJS = "nodejs"
    SWIFT = "swift"
    DOCKER = "docker"

    @property
    def has_debug_port(self) -> bool:
        return self in (BuildType.NODEJS, BuildType.LIBERTY, BuildType.SPRING)

    @property
    def uses_maven(self) -> bool:
        return self in (BuildType.LIBERTY, BuildType.SPRING)


class ProjectInfo(NamedTuple):
    """Result of project type detection."""

    language: Language
    build_type: BuildType


class ProjectResult(BaseModel):
    """Project type as reported back to callers."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    language: Language
    build_type: BuildType = Field(alias="buildType")


class ValidationResponse(BaseModel):
    """Outcome of validating a project directory."""

    status: str = "success"
    path: str
    result: ProjectResult


class DownloadResult(BaseModel):
    """Outcome of downloading a project template."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    status_message: str = Field("", alias="statusMessage")
