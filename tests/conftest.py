import json

import pytest

from icon_browser.catalog import IconRecord, load


def icon(name, codepoint, categories=(), tags=(), popularity=None):
    d = {"name": name, "codepoint": codepoint, "categories": list(categories), "tags": list(tags)}
    if popularity is not None:
        d["popularity"] = popularity
    return d


def catalog_bytes(*icons, **extra):
    doc = {"icons": list(icons)}
    doc.update(extra)
    return json.dumps(doc).encode("utf-8")


@pytest.fixture
def home():
    return IconRecord(name="home", codepoint=0xE88A, categories=("action",), tags=("house",))


@pytest.fixture
def small_catalog():
    return load(
        catalog_bytes(
            icon("home", 59530, ["action"], ["house", "building"], 434524),
            icon("search", 59574, ["action"], ["find", "magnify"], 540283),
            icon("close", 58829, ["navigation"], ["cancel", "exit", "x"], 402386),
            icon("menu", 58834, ["navigation"], ["hamburger"], 377516),
            icon("person", 59389, ["social"], ["account", "user"], 236541),
            icon("wifi", 58942, ["device", "notification"], ["network"], 40102),
        )
    )


@pytest.fixture(autouse=True)
def _no_debug_log(monkeypatch):
    monkeypatch.delenv("ICON_BROWSER_DEBUG", raising=False)
