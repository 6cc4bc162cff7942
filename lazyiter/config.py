"""
Process-wide configuration for lazy iteration.

The only setting today is pull tracing, which logs every ``pull()`` at
DEBUG level. It can be switched on from the environment with
``LAZYITER_TRACE=1``.
"""

from __future__ import annotations

import os
import threading

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class IterConfig:
    """
    Global configuration for lazy iteration.

    Created on first use; every producer in the process reads the same
    instance.
    """

    _instance: IterConfig | None = None
    _lock = threading.Lock()

    def __init__(self):
        self._trace: bool | None = None

    @classmethod
    def global_config(cls) -> IterConfig:
        """Get the global configuration instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = IterConfig()
        return cls._instance

    @property
    def trace(self) -> bool:
        """
        Whether every pull is logged at DEBUG level.

        Defaults to the value of the ``LAZYITER_TRACE`` environment variable.
        """
        if self._trace is None:
            env_trace = os.environ.get("LAZYITER_TRACE", "")
            self._trace = env_trace.strip().lower() in _TRUTHY
        return self._trace

    @trace.setter
    def trace(self, enabled: bool) -> None:
        """Enable or disable pull tracing."""
        if not isinstance(enabled, bool):
            raise TypeError(f"trace must be a bool, got {type(enabled).__name__}")
        self._trace = enabled

    def reset(self) -> None:
        """Forget explicit settings so the environment is consulted again."""
        self._trace = None


# Global configuration instance
_global_config = IterConfig.global_config()


def set_trace(enabled: bool) -> None:
    """
    Enable or disable per-pull DEBUG tracing.

    Args:
        enabled: True to log every pull

    Example:
        >>> from lazyiter import set_trace
        >>> set_trace(True)
    """
    _global_config.trace = enabled


def get_trace() -> bool:
    """
    Report whether per-pull tracing is enabled.

    Returns:
        Current trace setting
    """
    return _global_config.trace
