"""Profile fetcher - lists local AWS credential profiles."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ProfileFetcher:
    """Fetches the profile names boto3 can resolve locally."""

    def __init__(self, list_profiles_func: Any) -> None:
        """Initialize with the profile lister.

        Args:
            list_profiles_func: Callable returning profile names
        """
        self._list_profiles = list_profiles_func

    def fetch_profile_names(self) -> list[str]:
        names = [name for name in self._list_profiles() if name]
        # The credentials and config files can both declare a profile.
        return list(dict.fromkeys(names))


__all__ = ["ProfileFetcher"]
