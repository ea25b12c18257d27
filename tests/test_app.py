from __future__ import annotations

from starlette.testclient import TestClient

from mcp_gitingest import __version__
from mcp_gitingest.transports.app import app


def test_health() -> None:
    client = TestClient(app)

    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["version"] == __version__
    assert body["endpoint"] == "/mcp"
    assert sorted(body["tools"]) == [
        "analyze_code_files", "get_repo_docs", "get_repo_structure", "ingest_github_repo",
    ]


def test_root_banner() -> None:
    resp = TestClient(app).get("/")

    assert resp.status_code == 200
    assert resp.text.startswith("mcp-gitingest")
