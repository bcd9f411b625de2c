from __future__ import annotations

import os as _os
import sys as _sys


def main() -> int:
    # Ensure `import icon_browser` works when run as a script from a checkout.
    root = _os.path.abspath(_os.path.dirname(__file__))
    if root not in _sys.path:
        _sys.path.insert(0, root)

    from icon_browser.app import main as _inner_main  # type: ignore

    return int(_inner_main() or 0)


if __name__ == "__main__":
    raise SystemExit(main())
