"""Container version models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CodewindVersion(BaseModel):
    """Body returned by the environment endpoints."""

    codewind_version: Optional[str] = None


class ContainerVersions(BaseModel):
    """Versions of cwctl and each Codewind container."""

    model_config = ConfigDict(populate_by_name=True)

    cwctl_version: str = Field("", alias="CwctlVersion")
    pfe_version: str = Field("", alias="PFEVersion")
    gatekeeper_version: str = Field("", alias="GatekeeperVersion")
    performance_version: str = Field("", alias="PerformanceVersion")
