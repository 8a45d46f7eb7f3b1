"""Dirty flag for unsaved timeline mutations."""

import logging

logger = logging.getLogger(__name__)


class ChangeTracker:
    """
    Tracks whether an engine holds mutations that were not saved yet.

    Every create, edit, remove, swap and move marks the tracker; load-time
    reconstruction and reads never do.
    """

    def __init__(self) -> None:
        self._changed = False
        self._last_reason: str | None = None

    @property
    def changed(self) -> bool:
        return self._changed

    @property
    def last_reason(self) -> str | None:
        """Operation that most recently marked the tracker."""
        return self._last_reason

    def mark(self, reason: str) -> None:
        if not self._changed:
            logger.debug("Timeline marked dirty by %s", reason)
        self._changed = True
        self._last_reason = reason

    def reset(self) -> None:
        self._changed = False
        self._last_reason = None
