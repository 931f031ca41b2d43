"""Controllers: data providers and the cascading loader."""

from lazylogger.controllers.base import (
    BaseProvider,
    EmptyUpstreamError,
    FetchFailedError,
    ProviderError,
    WorkerResult,
)
from lazylogger.controllers.loader import CascadingResourceLoader

__all__ = [
    "BaseProvider",
    "CascadingResourceLoader",
    "EmptyUpstreamError",
    "FetchFailedError",
    "ProviderError",
    "WorkerResult",
]
