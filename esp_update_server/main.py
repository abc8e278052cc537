from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, Response

from .catalog import binary_path, resolve_entry
from .config import UpdateSettings
from .errors import BinaryMissing, ClientRejected, UpdateRejected
from .hash_compute import md5_file
from .logs import _ensure_logging, _log
from .request_log import RequestLog
from .schemas import DEVICE_HEADERS, VERSION_HEADER, UpdateRequest
from .version import VersionIdentifier, parse_version


def _remote_addr(request: Request) -> str:
    return request.client.host if request.client else "-"


def _dump_headers(request: Request) -> str:
    return "\n".join(f"{name}: {value}" for name, value in request.headers.items())


def _read_device(request: Request, settings: UpdateSettings) -> UpdateRequest:
    headers = request.headers
    if headers.get("user-agent") != settings.updater_agent:
        raise ClientRejected("Invalid request.")

    # Missing device headers stop the request here like every other rejection.
    if any(headers.get(name) is None for name in DEVICE_HEADERS):
        raise ClientRejected("Invalid request. Missing headers.")

    values: dict[str, Any] = {name: headers[name] for name in DEVICE_HEADERS}
    values["User-Agent"] = headers["user-agent"]
    values[VERSION_HEADER] = headers.get(VERSION_HEADER)
    return UpdateRequest.model_validate(values)


def _checksum(path: Path, ver: VersionIdentifier, catalog_version: str) -> str:
    try:
        return md5_file(path)
    except OSError as e:
        # The release process swapped the file out after the existence check.
        raise BinaryMissing(
            f"Missing file: {path} {ver.hardware_revision} {ver.software_version} = {catalog_version}"
        ) from e


def create_app(settings: Optional[UpdateSettings] = None) -> FastAPI:
    settings = settings or UpdateSettings.from_env()

    app = FastAPI(title="ESP8266 Update Server", version="1.0.0")
    app.state.settings = settings
    app.state.request_log = RequestLog(settings)

    @app.on_event("startup")
    async def _startup():
        _ensure_logging()
        _log().info(
            "Serving firmware from %s (catalog=%s)",
            settings.binary_store_dir,
            settings.catalog_filename,
        )

    @app.exception_handler(UpdateRejected)
    def _rejected(request: Request, exc: UpdateRejected) -> Response:
        request.app.state.request_log.write(_remote_addr(request), exc.log_message)
        _log().info("Rejected %s (%s): %s", _remote_addr(request), exc.status_code, exc.log_message)
        return Response(status_code=exc.status_code)

    @app.get("/")
    def read_root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/update")
    def update(request: Request):
        """
        ESP8266 httpUpdate endpoint.
        - 200 with the binary when the catalog lists another version for the hardware revision
        - 304 when the device already runs it
        - 403 / 500 with an empty body otherwise
        """
        request_log: RequestLog = request.app.state.request_log
        addr = _remote_addr(request)

        device = _read_device(request, settings)
        ver = parse_version(device.version)
        entry = resolve_entry(settings, ver.hardware_revision)

        path = binary_path(settings, entry)
        if not path.is_file():
            raise BinaryMissing(
                f"Missing file: {path} {ver.hardware_revision} {ver.software_version} = {entry.version}"
            )

        # Plain string comparison; "1.10" and "1.10.0" are different releases.
        update_due = entry.version != ver.software_version
        md5: Optional[str] = None
        if settings.check_sketch_md5 and not update_due:
            md5 = _checksum(path, ver, entry.version)
            update_due = device.sketch_md5.lower() != md5

        if not update_due:
            request_log.write(
                addr,
                f"Up to date: {device.sta_mac}  HW: {ver.hardware_revision} SW: {ver.software_version}",
            )
            return Response(status_code=304)

        request_log.write(addr, _dump_headers(request))
        if md5 is None:
            md5 = _checksum(path, ver, entry.version)

        _log().info(
            "Sending %s to %s (HW %s: %s -> %s)",
            path.name,
            device.sta_mac,
            ver.hardware_revision,
            ver.software_version,
            entry.version,
        )
        return FileResponse(
            path=path,
            media_type="application/octet-stream",
            filename=path.name,
            headers={"x-MD5": md5},
        )

    return app


app = create_app()
