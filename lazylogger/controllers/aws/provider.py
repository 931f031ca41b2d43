"""AWS provider - ECS clusters, services and events behind the BaseProvider calls.

All boto3 work is blocking, so every call hops to a worker thread with
``asyncio.to_thread``. Cluster and service listings are cached briefly; event
lines never are, so a refresh always reaches AWS.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

from lazylogger.constants.enums import EventSource, LoadTarget
from lazylogger.controllers.aws.fetchers import (
    ClusterFetcher,
    EventFetcher,
    LogFetcher,
    LogGroupNotConfiguredError,
    ProfileFetcher,
    ServiceFetcher,
    ServiceNotFoundError,
)
from lazylogger.controllers.aws.session import AwsClientFactory
from lazylogger.controllers.base.base_controller import (
    BaseProvider,
    EmptyUpstreamError,
    FetchFailedError,
)
from lazylogger.models.cache.data_cache import DataCache
from lazylogger.models.state.config_manager import AppSettings

logger = logging.getLogger(__name__)

R = TypeVar("R")

_EXPECTED_ERRORS = (
    BotoCoreError,
    ClientError,
    LogGroupNotConfiguredError,
    ServiceNotFoundError,
)


class AwsProvider(BaseProvider):
    """Data provider backed by Amazon ECS and CloudWatch Logs."""

    def __init__(
        self,
        settings: AppSettings,
        client_factory: AwsClientFactory | None = None,
    ) -> None:
        self._settings = settings
        self._clients = client_factory or AwsClientFactory(settings.region)
        self._cache = DataCache(ttl_seconds=settings.cache_ttl_seconds)

        def ecs_for(profile: str) -> Any:
            return self._clients.client(profile, "ecs")

        def logs_for(profile: str) -> Any:
            return self._clients.client(profile, "logs")

        self._profiles = ProfileFetcher(self._clients.available_profiles)
        self._clusters = ClusterFetcher(ecs_for)
        self._services = ServiceFetcher(ecs_for)
        self._events = EventFetcher(max_events=settings.max_log_events)
        self._logs = LogFetcher(
            ecs_for,
            logs_for,
            max_events=settings.max_log_events,
            lookback_minutes=settings.log_lookback_minutes,
        )

    @property
    def cache(self) -> DataCache:
        return self._cache

    async def _call(self, target: LoadTarget, func: Callable[..., R], *args: Any) -> R:
        """Run a blocking fetcher call on a thread, translating AWS failures."""
        try:
            return await asyncio.to_thread(func, *args)
        except _EXPECTED_ERRORS as exc:
            raise FetchFailedError(target, str(exc)) from exc

    async def list_profiles(self) -> Sequence[str]:
        return await self._call(LoadTarget.PROFILES, self._profiles.fetch_profile_names)

    async def list_clusters(self, profile: str) -> Sequence[str]:
        if not profile:
            raise EmptyUpstreamError(LoadTarget.CLUSTERS, "profile")
        key = ("clusters", profile)
        cached = await self._cache.get(key)
        if cached is not None:
            return cached
        names = await self._call(
            LoadTarget.CLUSTERS, self._clusters.fetch_cluster_names, profile
        )
        await self._cache.set(key, names)
        return names

    async def list_services(self, profile: str, cluster: str) -> Sequence[str]:
        if not profile:
            raise EmptyUpstreamError(LoadTarget.SERVICES, "profile")
        if not cluster:
            raise EmptyUpstreamError(LoadTarget.SERVICES, "cluster")
        key = ("services", profile, cluster)
        cached = await self._cache.get(key)
        if cached is not None:
            return cached
        names = await self._call(
            LoadTarget.SERVICES, self._services.fetch_service_names, profile, cluster
        )
        await self._cache.set(key, names)
        return names

    async def fetch_events(self, profile: str, cluster: str, service: str) -> Sequence[str]:
        for value, name in ((profile, "profile"), (cluster, "cluster"), (service, "service")):
            if not value:
                raise EmptyUpstreamError(LoadTarget.EVENTS, name)
        description = await self._call(
            LoadTarget.EVENTS, self._services.describe_service, profile, cluster, service
        )
        if self._settings.event_source is EventSource.CLOUDWATCH_LOGS:
            log_group = await self._call(
                LoadTarget.EVENTS, self._logs.log_group_for, profile, description
            )
            return await self._call(LoadTarget.EVENTS, self._logs.log_lines, profile, log_group)
        return self._events.service_event_lines(description)

    async def aclose(self) -> None:
        await self._cache.clear()
        self._clients.clear()


__all__ = ["AwsProvider"]
