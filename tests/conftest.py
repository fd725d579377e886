"""
Global test configuration and fixtures
"""

import json
from pathlib import Path

import pytest

from codegraph_routes.infra.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; every test starts from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_workspace(tmp_path):
    """
    Write a miniature TypeScript workspace under tmp_path.

    Usage:
        root = write_workspace({"apps/funsel/src/app/app-routing.module.ts": "..."},
                               paths={"@funsel/admin": ["libs/admin/src/index.ts"]})
    """

    def _write(files: dict[str, str], paths: dict[str, list[str]] | None = None) -> Path:
        for rel_path, content in files.items():
            target = tmp_path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        if paths is not None:
            config = {"compilerOptions": {"baseUrl": ".", "paths": paths}}
            (tmp_path / "tsconfig.base.json").write_text(json.dumps(config, indent=2), encoding="utf-8")
        return tmp_path

    return _write


# Pytest hooks
def pytest_collection_modifyitems(config, items):
    """Directory-based markers"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
