"""
Storyline - event and timeline-order engine for narrative authoring tools.

Main Features:
- Events keyed by process-unique UIDs
- Several independent event order lists (timeline views)
- Swap and positional move within one order list
- Chapter cross-referencing through a pluggable chapter directory
- Dirty flag for unsaved changes

Quick Start:
    >>> from storyline import Chapter, ChapterManager, EventManager
    >>> chapters = ChapterManager()
    >>> act_one = chapters.add_chapter(Chapter(uid=1, name="Act I"))
    >>> events = EventManager(chapters)
    >>> uid = events.create_event("Arrival", "The ship lands", "#ffffff", act_one)
    >>> events.move(0, 0, 0)
    >>> events.has_changed()
    True

Architecture:
    Host (UI / persistence) → EventManager → UIDAllocator + OrderListManager + ChapterLinker
"""

__version__ = "0.1.0"

from storyline.core.config import StorylineConfig
from storyline.core.exceptions import (
    ChapterNotFoundError,
    DuplicateEventError,
    EventNotFoundError,
    OrderListError,
    OrderListNotFoundError,
    OrderPositionError,
    StorylineError,
)
from storyline.core.uid import UIDAllocator
from storyline.timeline import (
    Chapter,
    ChapterDirectory,
    ChapterManager,
    Event,
    EventManager,
    EventRecord,
)

__all__ = [
    "Chapter",
    "ChapterDirectory",
    "ChapterManager",
    "ChapterNotFoundError",
    "DuplicateEventError",
    "Event",
    "EventManager",
    "EventNotFoundError",
    "EventRecord",
    "OrderListError",
    "OrderListNotFoundError",
    "OrderPositionError",
    "StorylineConfig",
    "StorylineError",
    "UIDAllocator",
    "__version__",
]
