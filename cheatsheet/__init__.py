"""Markdown to print-ready HTML cheat sheets."""

__version__ = "0.1.0"
