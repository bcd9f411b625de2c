"""
Debug helpers for the icon browser.

Breadcrumbs go to a single append-only log file and only when
`ICON_BROWSER_DEBUG` is set. Hard crashes inside the wx extension can't be
caught by Python, so `enable_fault_trace` hooks `faulthandler` into a file in
the cache dir; that is usually enough to see which code path was running.
"""

from __future__ import annotations

import faulthandler
import os
import platform
import signal
import sys
import tempfile
import time
from typing import TextIO

_FAULT_ENABLED = False
_FAULT_FH: TextIO | None = None


def truthy_env(name: str) -> bool:
    v = os.environ.get(name, "")
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def debug_log_path() -> str:
    path = (os.environ.get("ICON_BROWSER_DEBUG_LOG") or "").strip()
    if not path:
        path = os.path.join(tempfile.gettempdir(), "icon_browser_debug.log")
    return path


def debug_log(msg: str) -> None:
    """
    Best-effort breadcrumb logging.
    Safe to call from anywhere; does nothing unless debug mode is enabled.
    """
    if not truthy_env("ICON_BROWSER_DEBUG"):
        return
    try:
        ts = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(debug_log_path(), "a", encoding="utf-8", errors="replace") as f:
            f.write(f"[debug {ts}] {msg}\n")
    except Exception:
        return


def _write_header(fh: TextIO, path: str) -> None:
    fh.write("\n" + "=" * 80 + "\n")
    fh.write(f"Icon browser fault handler (pid={os.getpid()})\n")
    fh.write(f"timestamp: {time.strftime('%Y-%m-%d %H:%M:%S %z')}\n")
    fh.write(f"python: {sys.version.replace(os.linesep, ' ')}\n")
    fh.write(f"platform: {platform.platform()}\n")
    fh.write(f"argv: {sys.argv!r}\n")
    fh.write(f"log_path: {path}\n")
    fh.write("=" * 80 + "\n")
    fh.flush()


def enable_fault_trace(path: str) -> str | None:
    """
    Dump Python tracebacks of all threads on fatal signals (SIGSEGV, SIGABRT, ...).

    Returns the log file path if enabled, else None. Never raises.
    """
    global _FAULT_ENABLED, _FAULT_FH
    if _FAULT_ENABLED:
        return getattr(_FAULT_FH, "name", None)
    try:
        _FAULT_FH = open(path, "a", buffering=1, encoding="utf-8", errors="replace")
        _write_header(_FAULT_FH, path)
        faulthandler.enable(file=_FAULT_FH, all_threads=True)

        sigs = [signal.SIGSEGV, signal.SIGABRT, signal.SIGFPE, signal.SIGILL]
        # SIGBUS / SIGUSR2 aren't available on all platforms.
        for name in ("SIGBUS", "SIGUSR2"):
            if hasattr(signal, name):
                sigs.append(getattr(signal, name))
        for sig in sigs:
            try:
                faulthandler.register(sig, file=_FAULT_FH, all_threads=True, chain=True)
            except (AttributeError, ValueError, RuntimeError):
                # faulthandler.register is unavailable on Windows.
                pass

        _FAULT_ENABLED = True
        return path
    except Exception:
        _FAULT_ENABLED = False
        try:
            if _FAULT_FH:
                _FAULT_FH.close()
        except Exception:
            pass
        _FAULT_FH = None
        return None
