"""Event fetcher - formats ECS service events and CloudWatch log lines."""

from __future__ import annotations

import logging
import time
from contextlib import suppress
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

_AWSLOGS_DRIVER = "awslogs"
_AWSLOGS_GROUP_OPTION = "awslogs-group"


class LogGroupNotConfiguredError(LookupError):
    """The service's task definition does not ship logs to CloudWatch."""


def _as_datetime(value: Any) -> datetime | None:
    """Normalize boto3 datetimes, epoch milliseconds and ISO strings."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str) and value:
        with suppress(ValueError):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return None


def format_line(timestamp: Any, message: Any) -> str:
    """Render one entry as ``[timestamp] message``."""
    moment = _as_datetime(timestamp)
    stamp = moment.isoformat() if moment else "?"
    text = str(message or "").rstrip("\n")
    return f"[{stamp}] {text}"


class EventFetcher:
    """Turns ECS service descriptions into display lines."""

    def __init__(self, max_events: int) -> None:
        self._max_events = max_events

    def service_event_lines(self, service: dict[str, Any]) -> list[str]:
        """Format a service's deployment events, oldest first.

        ECS returns events newest first; they are reversed so the newest line
        is last, then truncated to the newest ``max_events``.
        """
        events = list(service.get("events", []))
        epoch = datetime.min.replace(tzinfo=timezone.utc)
        events.sort(key=lambda event: _as_datetime(event.get("createdAt")) or epoch)
        lines = [format_line(event.get("createdAt"), event.get("message")) for event in events]
        return lines[-self._max_events :]


class LogFetcher:
    """Reads recent CloudWatch log lines for an ECS service."""

    def __init__(
        self,
        ecs_client_for: Any,
        logs_client_for: Any,
        *,
        max_events: int,
        lookback_minutes: int,
    ) -> None:
        """Initialize with client lookups.

        Args:
            ecs_client_for: Callable ``(profile) -> boto3 ECS client``
            logs_client_for: Callable ``(profile) -> boto3 CloudWatch Logs client``
            max_events: Newest lines to keep
            lookback_minutes: How far back to search the log group
        """
        self._ecs_client_for = ecs_client_for
        self._logs_client_for = logs_client_for
        self._max_events = max_events
        self._lookback_ms = lookback_minutes * 60 * 1000

    def log_group_for(self, profile: str, service: dict[str, Any]) -> str:
        """Resolve the awslogs group of the first container that has one."""
        task_definition_arn = service.get("taskDefinition")
        if not task_definition_arn:
            raise LogGroupNotConfiguredError(
                f"service {service.get('serviceName')!r} has no task definition"
            )
        response = self._ecs_client_for(profile).describe_task_definition(
            taskDefinition=task_definition_arn
        )
        containers = response.get("taskDefinition", {}).get("containerDefinitions", [])
        for container in containers:
            log_config = container.get("logConfiguration") or {}
            if log_config.get("logDriver") != _AWSLOGS_DRIVER:
                continue
            group = (log_config.get("options") or {}).get(_AWSLOGS_GROUP_OPTION)
            if group:
                return group
        raise LogGroupNotConfiguredError(
            f"task definition {task_definition_arn} has no {_AWSLOGS_DRIVER} log group"
        )

    def log_lines(self, profile: str, log_group: str) -> list[str]:
        """Page through the whole lookback window, keeping only the newest lines.

        ``filter_log_events`` pages forward from ``startTime``, so the tail is
        only known after the last page. Older entries are trimmed by timestamp
        as pages come in.
        """
        logs = self._logs_client_for(profile)
        start_time = int(time.time() * 1000) - self._lookback_ms
        request: dict[str, Any] = {
            "logGroupName": log_group,
            "startTime": start_time,
            "limit": self._max_events,
        }
        newest: list[dict[str, Any]] = []
        pages = 0
        while True:
            response = logs.filter_log_events(**request)
            pages += 1
            newest.extend(response.get("events", []))
            if len(newest) > 2 * self._max_events:
                newest = self._newest(newest)
            next_token = response.get("nextToken")
            if not next_token:
                break
            request["nextToken"] = next_token
        logger.debug("Read %s pages from %s", pages, log_group)

        return [
            format_line(event.get("timestamp"), event.get("message"))
            for event in self._newest(newest)
        ]

    def _newest(self, events: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Return the newest ``max_events`` entries, oldest first."""
        ordered = sorted(events, key=lambda event: event.get("timestamp", 0))
        return ordered[-self._max_events :]


__all__ = [
    "EventFetcher",
    "LogFetcher",
    "LogGroupNotConfiguredError",
    "format_line",
]
