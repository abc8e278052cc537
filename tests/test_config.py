import hashlib
import logging
from datetime import datetime
from pathlib import Path

from esp_update_server.config import UpdateSettings
from esp_update_server.hash_compute import md5_file
from esp_update_server.logs import _log


def test_defaults():
    settings = UpdateSettings()
    assert settings.catalog_path == Path("bin") / "xremote_latest.txt"
    assert settings.updater_agent == "ESP8266-http-Update"
    assert settings.check_sketch_md5 is False
    assert settings.log_path(datetime(2026, 1, 5)) == Path("./logx_2026.1.5.log")


def test_from_env(monkeypatch):
    monkeypatch.setenv("UPDATE_BIN_DIR", "/srv/firmware")
    monkeypatch.setenv("UPDATE_CATALOG_FILE", "latest.json")
    monkeypatch.setenv("UPDATE_LOG_PATTERN", "/var/log/ota_{year}-{month}-{day}.log")
    monkeypatch.setenv("UPDATE_CHECK_SKETCH_MD5", "yes")

    settings = UpdateSettings.from_env()
    assert settings.catalog_path == Path("/srv/firmware/latest.json")
    assert settings.log_path(datetime(2026, 10, 19)) == Path("/var/log/ota_2026-10-19.log")
    assert settings.check_sketch_md5 is True


def test_md5_file_spans_chunks(tmp_path):
    data = bytes(range(256)) * 1000
    path = tmp_path / "fw.bin"
    path.write_bytes(data)
    assert md5_file(path, chunk_size=1000) == hashlib.md5(data).hexdigest()


def test_process_log_follows_hosting_server(monkeypatch):
    uvicorn_error = logging.getLogger("uvicorn.error")
    monkeypatch.setattr(uvicorn_error, "handlers", [logging.NullHandler()])
    _log.cache_clear()
    try:
        assert _log() is uvicorn_error
    finally:
        _log.cache_clear()
