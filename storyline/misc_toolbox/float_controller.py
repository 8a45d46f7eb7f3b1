"""
Float Controller - execution markers for engine operations.

Floats are named markers emitted as operations run. They help:
1. Verify in tests that an operation took the expected path
2. Trace a sequence of timeline edits while debugging

Collection is off by default; a disabled controller drops every float.

Usage:
    >>> fc = FloatController(enabled=True)
    >>> fc.float("event.create.success", uid=7)
    >>> assert fc.has_float("event.create.success")
    >>> assert fc.get_float("event.create.success").data["uid"] == 7
"""

from __future__ import annotations

from collections import defaultdict, deque
from datetime import datetime
import logging
from typing import Any

from storyline.core.config import FloatConfig

logger = logging.getLogger(__name__)


class FloatEvent:
    """
    Single float marker.

    Attributes:
        name: Marker name (e.g., "order.move")
        timestamp: When the marker was emitted
        data: Data attached to the marker
    """

    def __init__(self, name: str, data: dict[str, Any] | None = None):
        self.name = name
        self.timestamp = datetime.now()
        self.data = data or {}

    def __repr__(self) -> str:
        return f"FloatEvent(name={self.name!r}, data={self.data})"


class FloatController:
    """
    Collector for float markers.

    One global instance is shared by default (see get_float_controller);
    engines may also be handed their own controller.
    """

    _instance: FloatController | None = None

    def __init__(self, enabled: bool = False, max_events: int = 10000):
        """
        Initialize float controller.

        Args:
            enabled: Whether to collect floats
            max_events: Oldest floats are dropped past this count (0=unlimited)
        """
        self.enabled = enabled
        self.max_events = max_events
        self._floats: deque[FloatEvent] = deque(maxlen=max_events or None)
        self._floats_by_name: dict[str, deque[FloatEvent]] = defaultdict(deque)

    @classmethod
    def from_config(cls, config: FloatConfig | None = None) -> FloatController:
        """Build a controller from FloatConfig (environment prefix STORYLINE_FLOAT_)."""
        config = config or FloatConfig()
        return cls(enabled=config.enabled, max_events=config.max_events)

    @classmethod
    def get_instance(cls, enabled: bool | None = None) -> FloatController:
        """
        Get the global instance.

        Args:
            enabled: Override enabled state

        Returns:
            Global FloatController instance
        """
        if cls._instance is None:
            cls._instance = cls(enabled=enabled if enabled is not None else False)
        elif enabled is not None:
            cls._instance.enabled = enabled

        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the global instance (for tests)."""
        cls._instance = None

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def float(self, event_name: str, **data: Any) -> FloatEvent | None:
        """
        Emit a float.

        Args:
            event_name: Marker name (e.g., "event.remove.success")
            **data: Data to attach

        Returns:
            FloatEvent if enabled, None otherwise
        """
        if not self.enabled:
            return None

        event = FloatEvent(name=event_name, data=data)

        if self._floats.maxlen is not None and len(self._floats) == self._floats.maxlen:
            oldest = self._floats[0]
            self._floats_by_name[oldest.name].popleft()
            if not self._floats_by_name[oldest.name]:
                del self._floats_by_name[oldest.name]

        self._floats.append(event)
        self._floats_by_name[event_name].append(event)

        logger.debug("FLOAT[%s] %s", event_name, data)
        return event

    def has_float(self, name: str) -> bool:
        return name in self._floats_by_name

    def get_floats(self, pattern: str | None = None) -> list[FloatEvent]:
        """
        Get all floats, optionally filtered.

        Args:
            pattern: Exact name, or prefix ending in "*" (e.g., "order.*")

        Returns:
            Matching floats in emission order
        """
        if pattern is None:
            return list(self._floats)

        if pattern.endswith("*"):
            prefix = pattern[:-1]
            return [event for event in self._floats if event.name.startswith(prefix)]
        return list(self._floats_by_name.get(pattern, ()))

    def get_float(self, name: str, index: int = 0) -> FloatEvent | None:
        events = self._floats_by_name.get(name, ())
        if index < len(events):
            return events[index]
        return None

    def count_floats(self, pattern: str | None = None) -> int:
        return len(self.get_floats(pattern))

    def clear(self) -> None:
        """Clear all collected floats."""
        self._floats.clear()
        self._floats_by_name.clear()

    def get_report(self) -> dict[str, Any]:
        """
        Summarize collected floats.

        Returns:
            Dict with total and per-name counts
        """
        return {
            "enabled": self.enabled,
            "total_floats": len(self._floats),
            "float_counts": {name: len(events) for name, events in self._floats_by_name.items()},
        }

    def __repr__(self) -> str:
        return f"FloatController(enabled={self.enabled}, floats={len(self._floats)})"


def get_float_controller(enabled: bool | None = None) -> FloatController:
    """Get the global float controller."""
    return FloatController.get_instance(enabled=enabled)


def float_event(event_name: str, **data: Any) -> FloatEvent | None:
    """Emit a float on the global controller."""
    return FloatController.get_instance().float(event_name, **data)


class FloatContext:
    """
    Context manager that collects floats for the duration of a block.

    Usage:
        >>> with FloatContext() as fc:
        ...     manager.swap(0, 0, 1)
        ...     assert fc.has_float("order.swap")
    """

    def __init__(self, controller: FloatController | None = None, enabled: bool = True):
        self.enabled = enabled
        self.fc = controller or FloatController.get_instance()
        self._old_enabled = self.fc.enabled

    def __enter__(self) -> FloatController:
        self.fc.enabled = self.enabled
        self.fc.clear()
        return self.fc

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.fc.enabled = self._old_enabled
        return False
