import json

import httpx
import pytest
from click.testing import CliRunner

from cwctl.models.connection import Connection


class RecordingClient(httpx.Client):
    """HTTP client that exposes the requests its transport received."""

    def __init__(self, requests, **kwargs):
        super().__init__(**kwargs)
        self.requests = requests


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def connection():
    """Provides the connection used by service tests."""
    return Connection(id="local", label="Codewind local connection", url="http://codewind.test")


@pytest.fixture
def make_client():
    """Builds an HTTP client whose responses come from a route table.

    Routes map a URL path to a response status and JSON-able body (or raw
    bytes). Every request is recorded on ``client.requests``.
    """
    def _make(routes):
        requests = []

        def handler(request):
            requests.append(request)
            status, body = routes.get(request.url.path, (404, {"message": "not found"}))
            if isinstance(body, bytes):
                return httpx.Response(status, content=body)
            return httpx.Response(status, content=json.dumps(body).encode())

        return RecordingClient(requests, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.codewind configuration."""
    config_dir = tmp_path / "cwctl-config"
    monkeypatch.setenv("CWCTL_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("CWCTL_LOCAL_URL", raising=False)
    monkeypatch.delenv("CWCTL_HTTP_TIMEOUT", raising=False)
    return config_dir


@pytest.fixture
def project_factory(tmp_path):
    """Creates sample projects of each supported kind."""
    def _make(kind):
        root = tmp_path / f"{kind}-project"
        root.mkdir()
        if kind == "liberty":
            (root / "pom.xml").write_text("<project><groupId>org.eclipse.microprofile</groupId></project>")
            server_dir = root / "src" / "main" / "liberty" / "config"
            server_dir.mkdir(parents=True)
            (server_dir / "server.xml").write_text("<server/>")
        elif kind == "spring":
            (root / "pom.xml").write_text(
                "<project><parent><groupId>org.springframework.boot</groupId></parent></project>"
            )
            (root / "src").mkdir()
            (root / "src" / "Application.java").write_text("class Application {}")
        elif kind == "node":
            (root / "package.json").write_text('{"name": "node-project"}')
            (root / "server.js").write_text("console.log('hi')")
        elif kind == "swift":
            (root / "Package.swift").write_text("// swift-tools-version:5.0")
            (root / "Sources").mkdir()
            (root / "Sources" / "main.swift").write_text("print(\"hi\")")
        elif kind == "python":
            (root / "Dockerfile").write_text("FROM python:3")
            (root / "app.py").write_text("print('hi')")
        elif kind == "go":
            (root / "Dockerfile").write_text("FROM golang")
            (root / "main.go").write_text("package main")
        return root

    return _make
