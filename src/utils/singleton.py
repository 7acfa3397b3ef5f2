"""Singleton metaclass shared by process-wide helpers."""

from typing import Any, Dict, Type


class Singleton(type):
    """Metaclass keeping one instance per class.

    Usage:
        class ConfigProvider(metaclass=Singleton):
            pass
    """

    _instances: Dict[Type, Any] = {}

    def __call__(cls, *args, **kwargs):
        """Return the existing instance, creating it on first call."""
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls) -> None:
        """Forget the cached instance so the next call builds a new one."""
        cls._instances.pop(cls, None)
