import pytest

from conftest import catalog_bytes, icon
from icon_browser.catalog import ParseFailure, load
from icon_browser.debug import debug_log, debug_log_path, truthy_env


@pytest.mark.parametrize("value,expected", [("1", True), (" Yes ", True), ("on", True), ("0", False), ("", False)])
def test_truthy_env(monkeypatch, value, expected):
    monkeypatch.setenv("ICON_BROWSER_X", value)
    assert truthy_env("ICON_BROWSER_X") is expected


def test_debug_log_is_silent_by_default(tmp_path, monkeypatch):
    log = tmp_path / "debug.log"
    monkeypatch.setenv("ICON_BROWSER_DEBUG_LOG", str(log))
    debug_log("hello")
    assert not log.exists()


def test_catalog_breadcrumbs(tmp_path, monkeypatch):
    log = tmp_path / "debug.log"
    monkeypatch.setenv("ICON_BROWSER_DEBUG", "1")
    monkeypatch.setenv("ICON_BROWSER_DEBUG_LOG", str(log))
    assert debug_log_path() == str(log)

    load(catalog_bytes(icon("home", 59530, ["action"], [], 10)))
    with pytest.raises(ParseFailure):
        load(b"[]")

    text = log.read_text(encoding="utf-8")
    assert "catalog loaded: items=1 categories=1 representatives=1" in text
    assert "catalog parse failed" in text


def test_unwritable_log_path_never_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("ICON_BROWSER_DEBUG", "1")
    monkeypatch.setenv("ICON_BROWSER_DEBUG_LOG", str(tmp_path / "missing" / "dir" / "debug.log"))
    debug_log("dropped")
