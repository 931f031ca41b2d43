"""Tests for base provider module."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from lazylogger.constants.enums import LoadTarget
from lazylogger.controllers.base.base_controller import (
    BaseProvider,
    EmptyUpstreamError,
    FetchFailedError,
    ProviderError,
    WorkerResult,
)


class TestWorkerResult:
    """Tests for WorkerResult dataclass."""

    def test_worker_result_success(self) -> None:
        """Test successful worker result."""
        result = WorkerResult(success=True, data=["web"], duration_ms=100.0)
        assert result.success is True
        assert result.data == ["web"]
        assert result.error is None
        assert result.duration_ms == 100.0

    def test_worker_result_error(self) -> None:
        """Test error worker result."""
        result = WorkerResult(success=False, error="Something went wrong", duration_ms=50.0)
        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"

    def test_worker_result_defaults(self) -> None:
        """Test WorkerResult default values."""
        result = WorkerResult(success=True)
        assert result.data is None
        assert result.error is None
        assert result.duration_ms == 0.0


class TestProviderErrors:
    """Tests for provider exceptions."""

    def test_fetch_failed_names_target(self) -> None:
        error = FetchFailedError(LoadTarget.SERVICES, "throttled")
        assert str(error) == "services: throttled"
        assert error.target is LoadTarget.SERVICES
        assert isinstance(error, ProviderError)

    def test_empty_upstream_names_missing_choice(self) -> None:
        error = EmptyUpstreamError(LoadTarget.CLUSTERS, "profile")
        assert str(error) == "cannot fetch clusters without a profile"
        assert error.missing == "profile"
        assert isinstance(error, ProviderError)


class _StaticProvider(BaseProvider):
    async def list_profiles(self) -> Sequence[str]:
        return ["default"]

    async def list_clusters(self, profile: str) -> Sequence[str]:
        return []

    async def list_services(self, profile: str, cluster: str) -> Sequence[str]:
        return []

    async def fetch_events(self, profile: str, cluster: str, service: str) -> Sequence[str]:
        return []


class TestBaseProvider:
    """Tests for BaseProvider."""

    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseProvider()  # type: ignore[abstract]

    @pytest.mark.asyncio
    async def test_default_aclose_is_noop(self) -> None:
        provider = _StaticProvider()
        assert await provider.aclose() is None
        assert await provider.list_profiles() == ["default"]
