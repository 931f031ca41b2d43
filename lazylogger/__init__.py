"""LazyLogger - browse ECS clusters and tail service events in the terminal."""

__version__ = "0.1.0"

__all__ = ["__version__"]
