"""Cluster fetcher - lists ECS cluster names for a profile."""

from __future__ import annotations

import logging
from typing import Any

from lazylogger.constants.limits import DESCRIBE_CLUSTERS_BATCH

logger = logging.getLogger(__name__)


def _chunks(values: list[str], size: int) -> list[list[str]]:
    return [values[i : i + size] for i in range(0, len(values), size)]


class ClusterFetcher:
    """Fetches ECS cluster names."""

    def __init__(self, client_for: Any) -> None:
        """Initialize with an ECS client lookup.

        Args:
            client_for: Callable ``(profile) -> boto3 ECS client``
        """
        self._client_for = client_for

    def fetch_cluster_names(self, profile: str) -> list[str]:
        """List every cluster ARN, then describe them in batches for their names."""
        ecs = self._client_for(profile)
        arns: list[str] = []
        for page in ecs.get_paginator("list_clusters").paginate():
            arns.extend(page.get("clusterArns", []))
        if not arns:
            return []

        names: list[str] = []
        for batch in _chunks(sorted(arns), DESCRIBE_CLUSTERS_BATCH):
            response = ecs.describe_clusters(clusters=batch)
            names.extend(
                cluster["clusterName"]
                for cluster in response.get("clusters", [])
                if cluster.get("clusterName")
            )
            for failure in response.get("failures", []):
                logger.warning(
                    "describe_clusters failure for %s: %s",
                    failure.get("arn"),
                    failure.get("reason"),
                )
        return names


__all__ = ["ClusterFetcher"]
