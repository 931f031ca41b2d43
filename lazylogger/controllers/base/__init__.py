"""Base provider classes."""

from lazylogger.controllers.base.base_controller import (
    BaseProvider,
    EmptyUpstreamError,
    FetchFailedError,
    ProviderError,
    WorkerResult,
)

__all__ = [
    "BaseProvider",
    "EmptyUpstreamError",
    "FetchFailedError",
    "ProviderError",
    "WorkerResult",
]
