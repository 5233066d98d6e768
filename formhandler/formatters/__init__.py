"""Rendering strategies for fields and elements."""

from formhandler.formatters.base import Formatter, PlainFormatter
from formhandler.formatters.error_as_title import ErrorAsTitleFormatter

_FORMATTERS = {
    "plain": PlainFormatter,
    "error_as_title": ErrorAsTitleFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Create a formatter by name."""
    try:
        return _FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown formatter: '{name}'. Available: {sorted(_FORMATTERS)}")


__all__ = [
    "Formatter",
    "PlainFormatter",
    "ErrorAsTitleFormatter",
    "get_formatter",
]
