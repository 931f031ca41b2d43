"""Cascading resource loader for the profile -> cluster -> service -> events chain.

The loader runs once per scheduler tick. Each tick it:

1. clears the event log when the source picker is open, so stale lines for a
   triple that is about to change are never shown;
2. drains the inbox of finished fetches, installing a result only if the
   state still wants exactly that result;
3. launches a fetch for every list that is empty and whose upstream choices
   are committed, with at most one outstanding fetch per list.

Step 1 always runs before step 3 within a tick.

Fetches run as asyncio tasks (background mode) or are awaited within the
tick (inline mode). Either way the tasks only deposit results; all state
mutation happens inside :meth:`CascadingResourceLoader.tick`.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from lazylogger.constants.enums import (
    STAGE_TARGETS,
    ConfigStage,
    LoadState,
    LoadTarget,
    ScreenKind,
)
from lazylogger.controllers.base.base_controller import BaseProvider, WorkerResult
from lazylogger.models.state.app_state import AppState

logger = logging.getLogger(__name__)

_TARGET_STAGES: dict[LoadTarget, ConfigStage] = {
    target: stage for stage, target in STAGE_TARGETS.items()
}


@dataclass(frozen=True)
class FetchRequest:
    """One provider call, keyed by the committed choices it depends on."""

    target: LoadTarget
    key: tuple[str, ...] = ()


@dataclass(frozen=True)
class FetchOutcome:
    """A finished fetch waiting in the inbox."""

    request: FetchRequest
    result: WorkerResult


class CascadingResourceLoader:
    """Decides, once per tick, what to fetch, install, and clear."""

    def __init__(self, provider: BaseProvider, *, background: bool = True) -> None:
        self._provider = provider
        self._background = background
        self._pending: dict[LoadTarget, asyncio.Task[None]] = {}
        self._inbox: list[FetchOutcome] = []

    @property
    def background(self) -> bool:
        return self._background

    def is_pending(self, target: LoadTarget) -> bool:
        return target in self._pending

    # =========================================================================
    # Tick
    # =========================================================================

    async def tick(self, state: AppState) -> None:
        """Run one invalidate -> drain -> fetch pass over ``state``."""
        self.invalidate_stale(state)
        self.drain(state)

        for request in self.plan(state):
            if request.target in self._pending:
                continue
            if state.load_status[request.target].state is LoadState.IDLE:
                state.set_load_state(request.target, LoadState.LOADING)
            if self._background:
                self._launch(request)
            else:
                await self._run(request)

        if not self._background:
            self.drain(state)

    def invalidate_stale(self, state: AppState) -> bool:
        """Clear the event log while the source picker is open."""
        if state.screen.kind is not ScreenKind.CONFIGURING_SOURCE:
            return False
        status = state.load_status[LoadTarget.EVENTS]
        if state.event_log.is_empty() and status.state is LoadState.IDLE:
            return False
        logger.debug("Clearing %s event lines while reconfiguring", len(state.event_log))
        state.clear_event_log()
        return True

    def plan(self, state: AppState) -> list[FetchRequest]:
        """Return the fetches ``state`` needs right now, ignoring in-flight ones."""
        requests: list[FetchRequest] = []
        selection = state.selection

        if (
            state.screen.kind is ScreenKind.BROWSING
            and selection.is_complete()
            and self._wants(state, LoadTarget.EVENTS)
        ):
            requests.append(FetchRequest(LoadTarget.EVENTS, selection.as_tuple()))

        stage = state.active_stage
        if stage is ConfigStage.PROFILE and self._wants(state, LoadTarget.PROFILES):
            requests.append(FetchRequest(LoadTarget.PROFILES))
        elif (
            stage is ConfigStage.CLUSTER
            and selection.profile
            and self._wants(state, LoadTarget.CLUSTERS)
        ):
            requests.append(FetchRequest(LoadTarget.CLUSTERS, (selection.profile,)))
        elif (
            stage is ConfigStage.SERVICE
            and selection.profile
            and selection.cluster
            and self._wants(state, LoadTarget.SERVICES)
        ):
            requests.append(
                FetchRequest(LoadTarget.SERVICES, (selection.profile, selection.cluster))
            )
        return requests

    @staticmethod
    def _wants(state: AppState, target: LoadTarget) -> bool:
        # An empty list is requested again every tick, even after an empty result.
        return state.list_for(target).is_empty()

    # =========================================================================
    # Inbox
    # =========================================================================

    def drain(self, state: AppState) -> int:
        """Install every still-relevant finished fetch; return how many were applied."""
        outcomes, self._inbox = self._inbox, []
        applied = 0
        for outcome in outcomes:
            request, result = outcome.request, outcome.result
            if not self._is_relevant(state, request):
                logger.debug("Discarding stale %s result for %s", request.target.value, request.key)
                continue
            applied += 1
            if not result.success:
                logger.warning(
                    "Fetching %s for %s failed: %s",
                    request.target.value,
                    request.key or "local profiles",
                    result.error,
                )
                state.set_load_state(request.target, LoadState.FAILED, result.error)
                continue
            self._install(state, request.target, result.data or [])
            logger.debug(
                "Installed %s %s in %.1fms",
                len(state.list_for(request.target)),
                request.target.value,
                result.duration_ms,
            )
        return applied

    @staticmethod
    def _is_relevant(state: AppState, request: FetchRequest) -> bool:
        selection = state.selection
        target = request.target
        if not state.list_for(target).is_empty():
            return False
        if target is LoadTarget.EVENTS:
            return (
                state.screen.kind is ScreenKind.BROWSING
                and request.key == selection.as_tuple()
            )
        if state.active_stage is not _TARGET_STAGES[target]:
            return False
        if target is LoadTarget.CLUSTERS:
            return request.key == (selection.profile,)
        if target is LoadTarget.SERVICES:
            return request.key == (selection.profile, selection.cluster)
        return True

    @staticmethod
    def _install(state: AppState, target: LoadTarget, data: Sequence[str]) -> None:
        if target is LoadTarget.EVENTS:
            state.event_log.install(data)
            # Logs are read tailing from the bottom.
            state.event_log.select_last()
        else:
            state.stage_list(_TARGET_STAGES[target]).install(sorted(data))
        state.set_load_state(target, LoadState.LOADED)

    # =========================================================================
    # Fetching
    # =========================================================================

    def _launch(self, request: FetchRequest) -> None:
        logger.debug("Launching %s fetch for %s", request.target.value, request.key)
        self._pending[request.target] = asyncio.create_task(
            self._run(request),
            name=f"fetch-{request.target.value}",
        )

    async def _run(self, request: FetchRequest) -> None:
        started = time.monotonic()
        try:
            data = await self._fetch(request)
        except Exception as exc:
            result = WorkerResult(
                success=False,
                error=str(exc) or type(exc).__name__,
                duration_ms=(time.monotonic() - started) * 1000,
            )
        else:
            result = WorkerResult(
                success=True,
                data=list(data),
                duration_ms=(time.monotonic() - started) * 1000,
            )
        finally:
            self._pending.pop(request.target, None)
        self._inbox.append(FetchOutcome(request, result))

    async def _fetch(self, request: FetchRequest) -> Sequence[str]:
        provider = self._provider
        if request.target is LoadTarget.PROFILES:
            return await provider.list_profiles()
        if request.target is LoadTarget.CLUSTERS:
            return await provider.list_clusters(*request.key)
        if request.target is LoadTarget.SERVICES:
            return await provider.list_services(*request.key)
        return await provider.fetch_events(*request.key)

    async def wait_idle(self) -> None:
        """Wait until every outstanding fetch has deposited its result."""
        while self._pending:
            await asyncio.gather(*list(self._pending.values()), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel outstanding fetches; only used when the application shuts down."""
        tasks = list(self._pending.values())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
        self._inbox.clear()


__all__ = [
    "CascadingResourceLoader",
    "FetchOutcome",
    "FetchRequest",
]
