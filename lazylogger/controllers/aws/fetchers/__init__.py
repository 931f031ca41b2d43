"""AWS fetchers."""

from lazylogger.controllers.aws.fetchers.cluster_fetcher import ClusterFetcher
from lazylogger.controllers.aws.fetchers.event_fetcher import (
    EventFetcher,
    LogFetcher,
    LogGroupNotConfiguredError,
)
from lazylogger.controllers.aws.fetchers.profile_fetcher import ProfileFetcher
from lazylogger.controllers.aws.fetchers.service_fetcher import (
    ServiceFetcher,
    ServiceNotFoundError,
)

__all__ = [
    "ClusterFetcher",
    "EventFetcher",
    "LogFetcher",
    "LogGroupNotConfiguredError",
    "ProfileFetcher",
    "ServiceFetcher",
    "ServiceNotFoundError",
]
