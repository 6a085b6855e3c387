"""Result formatting."""

from .formatter import DEFAULT_SCHEME, DEFAULT_SEPARATOR, format_result

__all__ = ["DEFAULT_SCHEME", "DEFAULT_SEPARATOR", "format_result"]
