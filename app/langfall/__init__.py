"""Langfall - localized text resolution by language fallback."""

__version__ = "0.1.0"
