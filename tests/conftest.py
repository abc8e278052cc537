import json

import pytest
from fastapi.testclient import TestClient

from esp_update_server.config import UpdateSettings
from esp_update_server.main import create_app

FIRMWARE = b"\xe9\x01\x02\x03firmware-image" * 64


def device_headers(version="1.9_ABCD", **overrides):
    headers = {
        "User-Agent": "ESP8266-http-Update",
        "X-ESP8266-STA-MAC": "18:FE:34:00:00:01",
        "X-ESP8266-AP-MAC": "1A:FE:34:00:00:01",
        "X-ESP8266-FREE-SPACE": "671744",
        "X-ESP8266-SKETCH-SIZE": "373904",
        "X-ESP8266-SKETCH-MD5": "0123456789abcdef0123456789abcdef",
        "X-ESP8266-CHIP-SIZE": "4194304",
        "X-ESP8266-SDK-VERSION": "2.2.1(cfd48f3)",
    }
    if version is not None:
        headers["X-ESP8266-VERSION"] = version
    headers.update(overrides)
    return {k: v for k, v in headers.items() if v is not None}


@pytest.fixture
def store(tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    (bin_dir / "fw_2_0.bin").write_bytes(FIRMWARE)
    (bin_dir / "xremote_latest.txt").write_text(
        json.dumps({"ABCD": {"version": "2.0", "file": "fw_2_0.bin"}})
    )
    return bin_dir


@pytest.fixture
def settings(store, tmp_path):
    return UpdateSettings(
        binary_store_dir=store,
        log_file_pattern=str(tmp_path / "logx_{year}.{month}.{day}.log"),
    )


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def read_log(tmp_path):
    def _read():
        return "".join(p.read_text() for p in sorted(tmp_path.glob("logx_*.log")))

    return _read
