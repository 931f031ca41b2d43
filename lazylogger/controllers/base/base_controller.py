"""Base provider with async worker-friendly patterns for LazyLogger.

Providers are the remote collaborators the loader calls. Every call is async
and may fail; the loader wraps each outcome in a ``WorkerResult`` so failures
never escape a tick.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from lazylogger.constants.enums import LoadTarget

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for worker operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class ProviderError(Exception):
    """Base exception for data-provider failures."""


class FetchFailedError(ProviderError):
    """A provider call for ``target`` failed."""

    def __init__(self, target: LoadTarget, message: str) -> None:
        super().__init__(f"{target.value}: {message}")
        self.target = target


class EmptyUpstreamError(ProviderError):
    """A fetch was attempted before the choice it depends on was committed."""

    def __init__(self, target: LoadTarget, missing: str) -> None:
        super().__init__(f"cannot fetch {target.value} without a {missing}")
        self.target = target
        self.missing = missing


class BaseProvider(ABC):
    """Remote data source for the profile -> cluster -> service -> events chain.

    Subclasses implement the four listing calls; each returns plain strings.
    """

    @abstractmethod
    async def list_profiles(self) -> Sequence[str]:
        """Return locally available credential profile names."""
        ...

    @abstractmethod
    async def list_clusters(self, profile: str) -> Sequence[str]:
        """Return cluster identifiers reachable under ``profile``."""
        ...

    @abstractmethod
    async def list_services(self, profile: str, cluster: str) -> Sequence[str]:
        """Return service identifiers within ``cluster``."""
        ...

    @abstractmethod
    async def fetch_events(self, profile: str, cluster: str, service: str) -> Sequence[str]:
        """Return formatted log/event lines, oldest first."""
        ...

    async def aclose(self) -> None:
        """Release provider resources. The default has none."""
        return None


__all__ = [
    "BaseProvider",
    "EmptyUpstreamError",
    "FetchFailedError",
    "ProviderError",
    "WorkerResult",
]
