"""Thread-safe route and secret caches with change notification for xDS-style servers."""

__version__ = "0.1.0"
__all__ = ["routecache", "secretcache"]