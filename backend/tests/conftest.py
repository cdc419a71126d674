"""Shared fixtures: a throwaway root directory and apps built on top of it."""

import pytest
from fastapi.testclient import TestClient

from backend.fileserver.config import HandlerSettings, Settings
from backend.fileserver.main import create_app


@pytest.fixture
def root_dir(tmp_path):
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "site").mkdir()
    (root / "report.csv").write_text("a,b\n1,2\n")
    (root / "sub" / "notes.txt").write_text("hello")
    (root / "site" / "index.html").write_text("<h1>home</h1>")
    # sibling of the root, reachable only through ".."
    (tmp_path / "secret.txt").write_text("top secret")
    return root


def _make_settings(root, legacy=False, **kwargs):
    return Settings(handler=HandlerSettings(root_directory=str(root), legacy_path_resolution=legacy), **kwargs)


@pytest.fixture
def client(root_dir):
    return TestClient(create_app(_make_settings(root_dir)))


@pytest.fixture
def make_settings():
    return _make_settings
