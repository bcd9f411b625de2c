from __future__ import annotations

import os

from .catalog import CatalogIndex, LoadError, load
from .config import Config
from .debug import debug_log


BUNDLED_CATALOG = "icons-meta.json"


class ResourceError(LoadError):
    pass


def data_dir() -> str:
    return os.path.join(os.path.abspath(os.path.dirname(__file__)), "data")


def catalog_path_for(cfg: Config) -> str:
    p = str(cfg.catalog_path or "").strip()
    if p:
        return os.path.abspath(os.path.expanduser(p))
    return os.path.join(data_dir(), BUNDLED_CATALOG)


def read_catalog_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise ResourceError(f"cannot read catalog {path!r}: {exc}") from exc


def load_catalog(cfg: Config) -> CatalogIndex:
    """
    Read the configured catalog file and index it.
    Raises ResourceError (unreadable) or ParseFailure (malformed).
    """
    path = catalog_path_for(cfg)
    debug_log(f"loading catalog from {path!r}")
    return load(read_catalog_bytes(path))


def icon_font_path_for(cfg: Config) -> str:
    """
    Absolute icon font path, or "" when none is configured or the file is missing.
    """
    p = str(cfg.icon_font_path or "").strip()
    if not p:
        return ""
    p = os.path.abspath(os.path.expanduser(p))
    return p if os.path.isfile(p) else ""
