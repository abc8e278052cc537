from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

# ---------------------------
# Defaults (match the deployed layout)
# ---------------------------
DEFAULT_BIN_DIR = "bin"
DEFAULT_CATALOG_FILE = "xremote_latest.txt"
DEFAULT_LOG_PATTERN = "./logx_{year}.{month}.{day}.log"
DEFAULT_UPDATER_AGENT = "ESP8266-http-Update"

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class UpdateSettings:
    binary_store_dir: Path = Path(DEFAULT_BIN_DIR)
    catalog_filename: str = DEFAULT_CATALOG_FILE
    log_file_pattern: str = DEFAULT_LOG_PATTERN
    updater_agent: str = DEFAULT_UPDATER_AGENT
    # Also push an update when the device's sketch MD5 differs from the binary.
    check_sketch_md5: bool = False

    @property
    def catalog_path(self) -> Path:
        return Path(self.binary_store_dir) / self.catalog_filename

    def log_path(self, now: datetime) -> Path:
        """One log file per calendar day, unpadded month and day (logx_2026.1.5.log)."""
        return Path(self.log_file_pattern.format(year=now.year, month=now.month, day=now.day))

    @classmethod
    def from_env(cls) -> "UpdateSettings":
        return cls(
            binary_store_dir=Path(os.getenv("UPDATE_BIN_DIR", DEFAULT_BIN_DIR)),
            catalog_filename=os.getenv("UPDATE_CATALOG_FILE", DEFAULT_CATALOG_FILE),
            log_file_pattern=os.getenv("UPDATE_LOG_PATTERN", DEFAULT_LOG_PATTERN),
            updater_agent=os.getenv("UPDATE_AGENT", DEFAULT_UPDATER_AGENT),
            check_sketch_md5=_flag("UPDATE_CHECK_SKETCH_MD5"),
        )
