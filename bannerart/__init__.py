"""Render text as large ASCII-art banners, plain, coloured, aligned or saved to a file."""

__version__ = "0.1.0"