from viewcache.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
