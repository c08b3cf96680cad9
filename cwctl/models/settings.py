"""Project settings models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CWSettings(BaseModel):
    """Contents of a project's .cw-settings file.

    Field aliases are the names the Codewind server reads, so they must not
    change. Optional fields are left out of the file when unset.
    """

    model_config = ConfigDict(populate_by_name=True)

    context_root: str = Field("", alias="contextRoot")
    internal_port: str = Field("", alias="internalPort")
    health_check: str = Field("", alias="healthCheck")
    internal_debug_port: Optional[str] = Field(None, alias="internalDebugPort")
    is_https: bool = Field(False, alias="isHttps")
    ignored_paths: List[str] = Field(default_factory=lambda: [""], alias="ignoredPaths")
    maven_profiles: Optional[List[str]] = Field(None, alias="mavenProfiles")
    maven_properties: Optional[List[str]] = Field(None, alias="mavenProperties")
    status_ping_timeout: str = Field("", alias="statusPingTimeout")

    def to_json(self) -> str:
        """Serialize using the server's field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class SettingsDefaults(BaseModel):
    """Values used for optional settings when a build type needs them."""

    internal_debug_port: str = ""
    maven_profiles: List[str] = Field(default_factory=lambda: [""])
    maven_properties: List[str] = Field(default_factory=lambda: [""])
