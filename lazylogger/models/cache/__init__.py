"""Cache models."""

from lazylogger.models.cache.data_cache import DataCache

__all__ = ["DataCache"]
