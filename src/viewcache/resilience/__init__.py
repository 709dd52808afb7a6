"""Resilience – deadlines for store calls on the request path."""
from viewcache.resilience.timeouts import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
