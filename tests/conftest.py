"""Root conftest: shared fixtures for navigator and API tests.

Provides:
- Synthetic project builders in tmp_path
- A fresh CodebaseNavigator per test (isolated history)
- API client with the navigator dependency overridden
- Autouse guard forcing the pure-Python structure listing
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from compass.config.settings import settings
from compass.services.navigator import AnalysisSession, CodebaseNavigator

# ─────────────────────────────────────────────────────────────────────────────
# Environment Guards
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def no_external_tree(monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the listing utility at a binary that does not exist.

    Keeps structure output identical whether or not `tree` is installed.
    Tests that exercise the subprocess path mock it explicitly.
    """
    monkeypatch.setattr(settings, "tree_command", "compass-test-missing-tree")


# ─────────────────────────────────────────────────────────────────────────────
# Synthetic Projects
# ─────────────────────────────────────────────────────────────────────────────


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create `files` (relative path → content) under root and return root."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory building a project directory from a {path: content} mapping."""

    def _make(files: dict[str, str], name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        return write_tree(root, files)

    return _make


EXPRESS_INDEX = """const express = require('express');
const app = express();

app.get('/', (req, res) => {
  res.send('Hello World');
});

app.listen(3000);
"""

EXPRESS_PACKAGE = """{
  "name": "demo-server",
  "version": "1.0.0",
  "dependencies": {
    "express": "^4.18.0"
  }
}
"""

EXPRESS_README = """# Demo Server

A tiny Express application used to demonstrate the navigator.
"""


@pytest.fixture
def express_project(make_project) -> Path:
    """package.json + src/index.js (Express) + README.md."""
    return make_project(
        {
            "package.json": EXPRESS_PACKAGE,
            "src/index.js": EXPRESS_INDEX,
            "README.md": EXPRESS_README,
        },
        name="demo-server",
    )


# ─────────────────────────────────────────────────────────────────────────────
# Navigator + API
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def navigator() -> CodebaseNavigator:
    """Navigator with its own empty session."""
    return CodebaseNavigator(session=AnalysisSession())


@pytest.fixture
async def api_client(navigator: CodebaseNavigator):
    """HTTP client against the app with get_navigator overridden.

    Every request in one test shares the same navigator, like the
    process-wide singleton in production.
    """
    from compass.api.deps import get_navigator
    from compass.main import app

    app.dependency_overrides[get_navigator] = lambda: navigator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
