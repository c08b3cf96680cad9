"""Connection models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Connection(BaseModel):
    """A Codewind deployment that cwctl can talk to."""

    model_config = ConfigDict(extra="allow")

    id: str
    label: str = ""
    url: str
    access_token: Optional[str] = None

    @property
    def base_url(self) -> str:
        """URL without a trailing slash, ready for path concatenation."""
        return self.url.rstrip("/")


class ConnectionsFile(BaseModel):
    """On-disk layout of the connections file."""

    schemaversion: int = 1
    connections: List[Connection] = Field(default_factory=list)


class GitCredentials(BaseModel):
    """Credentials for downloading templates from private repositories."""

    username: Optional[str] = None
    password: Optional[str] = None
    personal_access_token: Optional[str] = None
