"""
UID Allocator - issues and reclaims event identifiers.

Each engine owns one allocator, so independent engines never share
identifier state.

Policies:
- RETIRE (default): released UIDs are never handed out again
- REUSE: released UIDs are reissued, smallest first

Loading persisted state goes through claim(), which also moves the
counter past the claimed UID.
"""

import heapq
import logging

from storyline.core.config import MAX_UID
from storyline.core.exceptions import InvalidUIDError, UIDConflictError, UIDExhaustedError

logger = logging.getLogger(__name__)


class UIDAllocator:
    """
    Allocator for 64-bit event UIDs.

    Usage:
        >>> allocator = UIDAllocator()
        >>> uid = allocator.next_uid()
        >>> allocator.remove_uid(uid)
    """

    def __init__(self, start: int = 1, reuse: bool = False) -> None:
        """
        Initialize UIDAllocator.

        Args:
            start: First UID to issue
            reuse: Whether released UIDs go back into circulation
        """
        self._check_range(start)
        self._next = start
        self._reuse = reuse
        self._in_use: set[int] = set()
        self._free: list[int] = []

    @staticmethod
    def _check_range(uid: int) -> None:
        if not 0 <= uid <= MAX_UID:
            msg = f"UID {uid} outside range 0..{MAX_UID}"
            raise InvalidUIDError(msg, uid=uid)

    @property
    def reuse(self) -> bool:
        return self._reuse

    @property
    def in_use_count(self) -> int:
        return len(self._in_use)

    def is_in_use(self, uid: int) -> bool:
        return uid in self._in_use

    def next_uid(self) -> int:
        """
        Issue a UID distinct from every UID currently in use.

        Returns:
            The new UID

        Raises:
            UIDExhaustedError: If the identifier space is used up
        """
        while self._free:
            uid = heapq.heappop(self._free)
            if uid not in self._in_use:
                self._in_use.add(uid)
                return uid

        while self._next in self._in_use:
            self._next += 1

        if self._next > MAX_UID:
            msg = "No UIDs left to issue"
            raise UIDExhaustedError(msg)

        uid = self._next
        self._next += 1
        self._in_use.add(uid)
        return uid

    def claim(self, uid: int) -> None:
        """
        Mark a caller-supplied UID as in use.

        Args:
            uid: UID restored from persisted state

        Raises:
            InvalidUIDError: If the UID is out of range
            UIDConflictError: If the UID is already in use
        """
        self._check_range(uid)
        if uid in self._in_use:
            msg = f"UID already in use: {uid}"
            raise UIDConflictError(msg, uid=uid)

        self._in_use.add(uid)
        if uid >= self._next:
            self._next = uid + 1

    def remove_uid(self, uid: int) -> None:
        """
        Release a UID.

        Unknown UIDs are ignored.

        Args:
            uid: UID to release
        """
        if uid not in self._in_use:
            logger.debug("Ignoring release of unknown UID %d", uid)
            return

        self._in_use.discard(uid)
        if self._reuse:
            heapq.heappush(self._free, uid)

    def reset(self) -> None:
        """Forget every live UID. The counter is not rewound."""
        if self._reuse:
            for uid in self._in_use:
                heapq.heappush(self._free, uid)
        self._in_use.clear()

    def __repr__(self) -> str:
        return f"UIDAllocator(next={self._next}, in_use={len(self._in_use)}, reuse={self._reuse})"
