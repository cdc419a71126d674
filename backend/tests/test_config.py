from backend.fileserver.config import Settings


def test_defaults(monkeypatch):
    for var in ("HANDLER__ROOT_DIRECTORY", "HANDLER__LEGACY_PATH_RESOLUTION", "PORT"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.handler.root_directory.endswith("files")
    assert s.handler.legacy_path_resolution is False
    assert s.port == 8080


def test_handler_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HANDLER__ROOT_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("HANDLER__LEGACY_PATH_RESOLUTION", "true")
    monkeypatch.setenv("PORT", "9000")
    s = Settings(_env_file=None)
    assert s.handler.root_directory == str(tmp_path)
    assert s.handler.legacy_path_resolution is True
    assert s.port == 9000
