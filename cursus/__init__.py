"""Cursus - multi-language curriculum content core."""

__version__ = "0.1.0"
