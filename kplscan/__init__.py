"""Lexical scanner for the KPL teaching language, in classic and extended dialects."""

__version__ = "0.1.0"