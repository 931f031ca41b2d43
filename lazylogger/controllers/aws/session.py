"""boto3 session and client factory shared by the AWS fetchers."""

from __future__ import annotations

import logging
import threading
from typing import Any

import boto3
from botocore.config import Config

from lazylogger.constants.timeouts import (
    AWS_CONNECT_TIMEOUT,
    AWS_MAX_ATTEMPTS,
    AWS_READ_TIMEOUT,
)

logger = logging.getLogger(__name__)


class AwsClientFactory:
    """Memoizes one boto3 session per profile and one client per (profile, service).

    boto3 sessions are not thread-safe, and fetchers run on worker threads, so
    session and client creation is serialized behind a lock. The clients
    themselves are safe to share.
    """

    def __init__(self, region: str) -> None:
        self._region = region
        self._config = Config(
            connect_timeout=AWS_CONNECT_TIMEOUT,
            read_timeout=AWS_READ_TIMEOUT,
            retries={"max_attempts": AWS_MAX_ATTEMPTS, "mode": "standard"},
        )
        self._sessions: dict[str, boto3.Session] = {}
        self._clients: dict[tuple[str, str], Any] = {}
        self._lock = threading.Lock()

    @property
    def region(self) -> str:
        return self._region

    def available_profiles(self) -> list[str]:
        """Profiles defined in the local AWS credentials and config files."""
        with self._lock:
            return list(boto3.Session().available_profiles)

    def _session(self, profile: str) -> boto3.Session:
        session = self._sessions.get(profile)
        if session is None:
            session = boto3.Session(profile_name=profile, region_name=self._region)
            self._sessions[profile] = session
        return session

    def client(self, profile: str, service_name: str) -> Any:
        """Return a cached boto3 client for ``service_name`` under ``profile``."""
        key = (profile, service_name)
        with self._lock:
            client = self._clients.get(key)
            if client is None:
                logger.debug("Creating %s client for profile %s", service_name, profile)
                client = self._session(profile).client(service_name, config=self._config)
                self._clients[key] = client
            return client

    def clear(self) -> None:
        with self._lock:
            self._clients.clear()
            self._sessions.clear()


__all__ = ["AwsClientFactory"]
