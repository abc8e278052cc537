from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import UpdateSettings
from .errors import CatalogMiss, CatalogUnavailable
from .schemas import CatalogEntry


def load_catalog(path: Path) -> dict[str, Any]:
    """Read the published catalog. Never cached: the release process may replace it at any time."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogUnavailable(f"cannot read catalog {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogUnavailable(f"catalog {path} is not a JSON object")
    return data


def resolve_entry(settings: UpdateSettings, hardware_revision: str) -> CatalogEntry:
    miss = f"Missing info for: {hardware_revision}"
    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogUnavailable as e:
        raise CatalogMiss(miss) from e

    raw = catalog.get(hardware_revision)
    if raw is None:
        raise CatalogMiss(miss)

    try:
        return CatalogEntry.model_validate(raw)
    except ValidationError as e:
        raise CatalogMiss(miss) from e


def binary_path(settings: UpdateSettings, entry: CatalogEntry) -> Path:
    return Path(settings.binary_store_dir) / entry.file
