import json
import os

import pytest

from icon_browser.catalog import ParseFailure
from icon_browser.config import Config
from icon_browser.resources import BUNDLED_CATALOG, ResourceError, catalog_path_for, icon_font_path_for, load_catalog


def test_missing_file_gives_defaults(tmp_path):
    cfg = Config.load(str(tmp_path / "nope.json"))
    assert cfg == Config()
    assert cfg.copy_animation_steps == 100
    assert cfg.copy_animation_tick_ms == 10
    assert (cfg.window_width, cfg.window_height) == (1000, 600)


def test_corrupt_file_gives_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf-8")
    assert Config.load(str(p)) == Config()


def test_partial_file_keeps_valid_keys(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(
        json.dumps({"window_width": 1400, "copy_animation_steps": 0, "grid_view": "yes", "catalog_path": " /x.json ", "bogus": 1}),
        encoding="utf-8",
    )
    cfg = Config.load(str(p))
    assert cfg.window_width == 1400
    assert cfg.copy_animation_steps == 100  # non-positive ignored
    assert cfg.grid_view is True  # wrong type ignored
    assert cfg.catalog_path == "/x.json"


def test_save_round_trip(tmp_path):
    p = tmp_path / "sub" / "config.json"
    cfg = Config(catalog_path="/tmp/icons.json", grid_view=False, copy_animation_steps=40)
    cfg.save(str(p))
    assert Config.load(str(p)) == cfg
    assert json.loads(p.read_text(encoding="utf-8"))["grid_view"] is False


def test_default_path_uses_xdg(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    Config(window_width=1234).save()
    assert os.path.isfile(tmp_path / "icon_browser" / "config.json")
    assert Config.load().window_width == 1234


def test_env_overrides_catalog_path(tmp_path, monkeypatch):
    monkeypatch.setenv("ICON_BROWSER_CATALOG", "/data/meta.json")
    cfg = Config.load_effective(str(tmp_path / "none.json"))
    assert cfg.catalog_path == "/data/meta.json"


def test_bundled_catalog_loads():
    cfg = Config()
    assert catalog_path_for(cfg).endswith(BUNDLED_CATALOG)
    cat = load_catalog(cfg)
    assert len(cat) > 0
    assert cat.lookup(59530).name == "home"
    assert "action" in cat.categories
    assert all(c in cat.category_representative for c in cat.categories)


def test_unreadable_catalog_raises_resource_error(tmp_path):
    with pytest.raises(ResourceError):
        load_catalog(Config(catalog_path=str(tmp_path / "missing.json")))


def test_malformed_catalog_file_raises_parse_failure(tmp_path):
    p = tmp_path / "meta.json"
    p.write_text('{"icons": [{"name": "a"}]}', encoding="utf-8")
    with pytest.raises(ParseFailure):
        load_catalog(Config(catalog_path=str(p)))


def test_icon_font_path_only_when_file_exists(tmp_path):
    assert icon_font_path_for(Config()) == ""
    assert icon_font_path_for(Config(icon_font_path=str(tmp_path / "missing.ttf"))) == ""
    font = tmp_path / "MaterialIcons-Regular.ttf"
    font.write_bytes(b"\x00\x01\x00\x00")
    assert icon_font_path_for(Config(icon_font_path=str(font))) == str(font)
