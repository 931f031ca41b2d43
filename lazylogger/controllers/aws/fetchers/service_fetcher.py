"""Service fetcher - lists and describes ECS services within a cluster."""

from __future__ import annotations

import logging
from typing import Any

from lazylogger.constants.limits import DESCRIBE_SERVICES_BATCH

logger = logging.getLogger(__name__)


class ServiceNotFoundError(LookupError):
    """The named service does not exist in the cluster."""


class ServiceFetcher:
    """Fetches ECS service names and service descriptions."""

    def __init__(self, client_for: Any) -> None:
        """Initialize with an ECS client lookup.

        Args:
            client_for: Callable ``(profile) -> boto3 ECS client``
        """
        self._client_for = client_for

    def fetch_service_names(self, profile: str, cluster: str) -> list[str]:
        """Page through the cluster's service ARNs and describe them ten at a time."""
        ecs = self._client_for(profile)
        arns: list[str] = []
        for page in ecs.get_paginator("list_services").paginate(cluster=cluster):
            arns.extend(page.get("serviceArns", []))

        arns.sort()
        names: list[str] = []
        for start in range(0, len(arns), DESCRIBE_SERVICES_BATCH):
            response = ecs.describe_services(
                cluster=cluster,
                services=arns[start : start + DESCRIBE_SERVICES_BATCH],
            )
            names.extend(
                service["serviceName"]
                for service in response.get("services", [])
                if service.get("serviceName")
            )
        return names

    def describe_service(self, profile: str, cluster: str, service: str) -> dict[str, Any]:
        """Return the full description of one service."""
        ecs = self._client_for(profile)
        response = ecs.describe_services(cluster=cluster, services=[service])
        for description in response.get("services", []):
            if description.get("serviceName") == service:
                return description
        raise ServiceNotFoundError(f"service {service!r} not found in cluster {cluster!r}")


__all__ = ["ServiceFetcher", "ServiceNotFoundError"]
