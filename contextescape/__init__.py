"""Escapers and filters for HTML, CSS, JavaScript and URL output contexts."""

__version__ = "0.1.0"

__all__ = ["css", "errors", "funcs", "htmlesc", "jsesc", "url"]