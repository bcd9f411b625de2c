"""
wx shell for the icon browser: window, search field focus adapter, timers.
"""

from .main_window import IconBrowserFrame

__all__ = ["IconBrowserFrame"]
