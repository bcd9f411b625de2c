"""
Material icon browser: catalog, search, grid layout and copy feedback for a glyph font.
"""

__version__ = "0.3.0"
