"""StreamScout — resolve gateway pages into ranked download links."""

__version__ = "0.1.0"
