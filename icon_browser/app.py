from __future__ import annotations

import datetime as _dt
import os
import sys
import traceback

from .catalog import CatalogIndex, LoadError
from .config import Config
from .debug import debug_log, enable_fault_trace
from .resources import catalog_path_for, icon_font_path_for, load_catalog
from .state import AppState


def app_cache_dir() -> str:
    """
    Per-user cache dir holding the boot log and the fault trace.
    """
    base = str(os.environ.get("XDG_CACHE_HOME") or "").strip()
    if not base and sys.platform == "win32":
        base = str(os.environ.get("LOCALAPPDATA") or "").strip()
    if not base:
        sub = ("Library", "Caches") if sys.platform == "darwin" else (".cache",)
        base = os.path.join(os.path.expanduser("~"), *sub)
    d = os.path.join(base, "icon_browser")
    try:
        os.makedirs(d, exist_ok=True)
    except OSError:
        # Boot log and fault trace are best-effort; their writers cope with a missing dir.
        pass
    return d


def _boot_log_path() -> str:
    return os.path.join(app_cache_dir(), "boot.log")


def _boot_log(msg: str) -> None:
    """
    Always-on, best-effort startup log.
    """
    try:
        ts = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(_boot_log_path(), "a", encoding="utf-8", errors="ignore") as f:
            f.write(f"[{ts}] {msg}\n")
    except OSError:
        return


def _show_error_dialog(title: str, message: str) -> None:
    try:
        import wx  # type: ignore

        _app = wx.GetApp() or wx.App(False)
        wx.MessageBox(message, title, wx.OK | wx.ICON_ERROR)
    except Exception:
        # Last resort: stderr
        sys.stderr.write(f"{title}\n{message}\n")


def _register_icon_font(cfg: Config) -> None:
    import wx  # type: ignore

    path = icon_font_path_for(cfg)
    if not path:
        debug_log("no icon font configured; relying on an installed face")
        return
    if not wx.Font.AddPrivateFont(path):
        _boot_log(f"AddPrivateFont failed for {path!r}")
    else:
        debug_log(f"registered icon font {path!r}")


def initial_state(cfg: Config, catalog: CatalogIndex) -> AppState:
    state = AppState(
        grid_view=cfg.grid_view,
        window_size=(cfg.window_width, cfg.window_height),
        animation_steps=cfg.copy_animation_steps,
    )
    state.set_catalog(catalog)
    return state


def main() -> int:
    _boot_log("=== icon browser start ===")
    _boot_log(f"pid={os.getpid()} argv={sys.argv!r} exe={sys.executable!r}")
    p = enable_fault_trace(os.path.join(app_cache_dir(), "fault_handler.log"))
    if p:
        _boot_log(f"fault_handler_log={p!r}")

    try:
        import wx  # type: ignore
    except ImportError:
        sys.stderr.write("wxPython is not available in this environment; install `wxPython`.\n")
        return 2

    cfg = Config.load_effective()
    _boot_log(f"catalog_path={catalog_path_for(cfg)!r}")

    app = wx.App(False)

    try:
        catalog = load_catalog(cfg)
    except LoadError as exc:
        _boot_log("catalog load failed:\n" + traceback.format_exc())
        _show_error_dialog(
            "Material Icon Browser",
            "Could not load the icon catalog.\n\n"
            f"{exc}\n\n"
            "Set `catalog_path` in the config file or ICON_BROWSER_CATALOG.",
        )
        return 1

    _register_icon_font(cfg)

    from .ui.main_window import IconBrowserFrame

    frm = IconBrowserFrame(None, initial_state(cfg, catalog), cfg)
    app.SetTopWindow(frm)
    frm.Show()
    app.MainLoop()
    _boot_log("wx MainLoop exited")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
