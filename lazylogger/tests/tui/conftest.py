"""Shared fixtures for the TUI test suite."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from lazylogger.controllers.base.base_controller import BaseProvider
from lazylogger.models.state.app_state import AppState, ScreenState


class FakeProvider(BaseProvider):
    """In-memory provider that records every call."""

    def __init__(self) -> None:
        self.profiles = ["prod", "dev"]
        self.clusters = {"dev": ["web", "batch"], "prod": ["payments"]}
        self.services = {("dev", "web"): ["worker", "api"], ("dev", "batch"): ["cron"]}
        self.events = {
            ("dev", "web", "api"): [
                "[2024-05-01T10:00:00+00:00] deployment started",
                "[2024-05-01T10:01:00+00:00] task started",
                "[2024-05-01T10:02:00+00:00] reached steady state",
            ],
        }
        self.calls: list[tuple[str, tuple[str, ...]]] = []
        self.closed = False
        self.gate: asyncio.Event | None = None

    async def _record(self, name: str, *args: str) -> None:
        self.calls.append((name, args))
        if self.gate is not None:
            await self.gate.wait()

    async def list_profiles(self) -> Sequence[str]:
        await self._record("list_profiles")
        return list(self.profiles)

    async def list_clusters(self, profile: str) -> Sequence[str]:
        await self._record("list_clusters", profile)
        return list(self.clusters.get(profile, []))

    async def list_services(self, profile: str, cluster: str) -> Sequence[str]:
        await self._record("list_services", profile, cluster)
        return list(self.services.get((profile, cluster), []))

    async def fetch_events(self, profile: str, cluster: str, service: str) -> Sequence[str]:
        await self._record("fetch_events", profile, cluster, service)
        return list(self.events.get((profile, cluster, service), []))

    async def aclose(self) -> None:
        self.closed = True

    def call_count(self, name: str) -> int:
        return sum(1 for call_name, _ in self.calls if call_name == name)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def browsing_state() -> AppState:
    """State with dev/web/api committed and the main view active."""
    state = AppState(screen=ScreenState.browsing())
    state.selection.commit_profile("dev")
    state.selection.commit_cluster("web")
    state.selection.commit_service("api")
    return state
