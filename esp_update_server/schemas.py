from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version: str
    file: str


class UpdateRequest(BaseModel):
    """Device identity reported by the ESP8266 HTTP updater."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_agent: str = Field(alias="User-Agent")
    sta_mac: str = Field(alias="X-ESP8266-STA-MAC")
    ap_mac: str = Field(alias="X-ESP8266-AP-MAC")
    free_space: str = Field(alias="X-ESP8266-FREE-SPACE")
    sketch_size: str = Field(alias="X-ESP8266-SKETCH-SIZE")
    sketch_md5: str = Field(alias="X-ESP8266-SKETCH-MD5")
    chip_size: str = Field(alias="X-ESP8266-CHIP-SIZE")
    sdk_version: str = Field(alias="X-ESP8266-SDK-VERSION")
    version: str | None = Field(default=None, alias="X-ESP8266-VERSION")


# Presence-only headers; values are passed through untouched.
DEVICE_HEADERS: tuple[str, ...] = (
    "X-ESP8266-STA-MAC",
    "X-ESP8266-AP-MAC",
    "X-ESP8266-FREE-SPACE",
    "X-ESP8266-SKETCH-SIZE",
    "X-ESP8266-SKETCH-MD5",
    "X-ESP8266-CHIP-SIZE",
    "X-ESP8266-SDK-VERSION",
)
VERSION_HEADER = "X-ESP8266-VERSION"
