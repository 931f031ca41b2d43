"""Cascading resource loader."""

from lazylogger.controllers.loader.cascading_loader import (
    CascadingResourceLoader,
    FetchOutcome,
    FetchRequest,
)

__all__ = ["CascadingResourceLoader", "FetchOutcome", "FetchRequest"]
