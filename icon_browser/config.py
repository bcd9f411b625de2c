from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields


def _default_config_path() -> str:
    # Prefer XDG config dir on Linux; otherwise fall back to home.
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        base = xdg
    else:
        base = os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, "icon_browser", "config.json")


@dataclass
class Config:
    # Catalog JSON path; empty means the bundled sample catalog.
    catalog_path: str = ""
    # Optional TTF/OTF with the icon glyphs, registered as a private font at startup.
    icon_font_path: str = ""
    icon_font_face: str = "Material Icons"
    window_width: int = 1000
    window_height: int = 600
    min_width: int = 800
    min_height: int = 450
    copy_animation_tick_ms: int = 10
    copy_animation_steps: int = 100
    grid_view: bool = True

    @staticmethod
    def from_dict(data: dict) -> "Config":
        """
        Build a Config from a (possibly partial) dict.
        Unknown keys are ignored; values of the wrong type keep the default.
        """
        cfg = Config()
        if not isinstance(data, dict):
            return cfg
        for f in fields(Config):
            if f.name not in data:
                continue
            default = getattr(cfg, f.name)
            v = data[f.name]
            if isinstance(default, bool):
                if isinstance(v, bool):
                    setattr(cfg, f.name, v)
            elif isinstance(default, int):
                if isinstance(v, int) and not isinstance(v, bool) and v > 0:
                    setattr(cfg, f.name, v)
            else:
                setattr(cfg, f.name, str(v or "").strip())
        return cfg

    @staticmethod
    def load(path: str | None = None) -> "Config":
        cfg_path = path or _default_config_path()
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Config.from_dict(data)
        except FileNotFoundError:
            return Config()
        except (OSError, ValueError):
            # Corrupted config: start fresh rather than refusing to open.
            return Config()

    @staticmethod
    def load_effective(path: str | None = None) -> "Config":
        """
        Load the user config, then apply environment overrides:
        - ICON_BROWSER_CATALOG: catalog JSON path
        """
        cfg = Config.load(path)
        env_catalog = str(os.environ.get("ICON_BROWSER_CATALOG") or "").strip()
        if env_catalog:
            cfg.catalog_path = env_catalog
        return cfg

    def save(self, path: str | None = None) -> None:
        cfg_path = path or _default_config_path()
        os.makedirs(os.path.dirname(cfg_path), exist_ok=True)
        with open(cfg_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, sort_keys=True)
            f.write("\n")
