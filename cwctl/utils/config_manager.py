"""Connection configuration management."""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ..core.constants import (
    CONFIG_DIR_ENV,
    CONNECTIONS_FILE_NAME,
    CONNECTIONS_SCHEMA_VERSION,
    DEFAULT_LOCAL_URL,
    LOCAL_CONNECTION_ID,
    LOCAL_CONNECTION_LABEL,
    LOCAL_URL_ENV,
)
from ..models.connection import Connection, ConnectionsFile
from ..services.exceptions import OP_CONNECTION, ConfigError, ConnectionNotFoundError

logger = logging.getLogger(__name__)


def default_config_dir() -> Path:
    """Directory holding cwctl's configuration files."""
    configured = os.environ.get(CONFIG_DIR_ENV)
    if configured:
        return Path(configured)
    return Path.home() / ".codewind" / "config"


class ConfigManager:
    """Manages the configured Codewind connections."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize config manager."""
        self.config_dir = config_dir or default_config_dir()
        self.connections_file = self.config_dir / CONNECTIONS_FILE_NAME

    def load_connections_file(self) -> ConnectionsFile:
        """Load the connections file, or an empty one if it does not exist."""
        if not self.connections_file.exists():
            return ConnectionsFile(schemaversion=CONNECTIONS_SCHEMA_VERSION)
        try:
            data = json.loads(self.connections_file.read_text())
            return ConnectionsFile(**data)
        except (ValueError, TypeError, ValidationError) as e:
            raise ConfigError(f"Invalid connections file {self.connections_file}: {e}", OP_CONNECTION) from e

    def save_connections_file(self, connections_file: ConnectionsFile):
        """Save the connections file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.connections_file.write_text(connections_file.model_dump_json(indent=2, exclude_none=True))

    def local_connection(self) -> Connection:
        """The local connection as it applies when the file has none."""
        url = os.environ.get(LOCAL_URL_ENV) or DEFAULT_LOCAL_URL
        return Connection(id=LOCAL_CONNECTION_ID, label=LOCAL_CONNECTION_LABEL, url=url)

    def list_connections(self) -> List[Connection]:
        """All connections, with the local connection first."""
        connections = self.load_connections_file().connections
        local = next((c for c in connections if c.id == LOCAL_CONNECTION_ID), None)
        others = [c for c in connections if c.id != LOCAL_CONNECTION_ID]
        return [local or self.local_connection()] + others

    def get_connection(self, conid: str) -> Connection:
        """Look up a connection by ID.

        Raises:
            ConnectionNotFoundError: If no connection has the ID
        """
        for connection in self.list_connections():
            if connection.id == conid:
                logger.debug(f"Using connection {conid} at {connection.url}")
                return connection
        raise ConnectionNotFoundError(conid)

    def add_connection(self, connection: Connection):
        """Add a connection, replacing any existing one with the same ID."""
        connections_file = self.load_connections_file()
        connections_file.connections = [c for c in connections_file.connections if c.id != connection.id]
        connections_file.connections.append(connection)
        self.save_connections_file(connections_file)
        logger.info(f"Saved connection {connection.id}")

    def remove_connection(self, conid: str):
        """Remove a connection.

        Raises:
            ConfigError: If the local connection is being removed
            ConnectionNotFoundError: If no connection has the ID
        """
        if conid == LOCAL_CONNECTION_ID:
            raise ConfigError("The local connection cannot be removed", OP_CONNECTION)
        connections_file = self.load_connections_file()
        remaining = [c for c in connections_file.connections if c.id != conid]
        if len(remaining) == len(connections_file.connections):
            raise ConnectionNotFoundError(conid)
        connections_file.connections = remaining
        self.save_connections_file(connections_file)
        logger.info(f"Removed connection {conid}")
