"""Timeline module: events, event order lists and chapter links."""

from storyline.timeline.changes import ChangeTracker
from storyline.timeline.chapters import Chapter, ChapterDirectory, ChapterLinker, ChapterManager
from storyline.timeline.manager import EventManager
from storyline.timeline.models import Event, EventManagerStats, EventRecord
from storyline.timeline.order import OrderListManager

__all__ = [
    "ChangeTracker",
    "Chapter",
    "ChapterDirectory",
    "ChapterLinker",
    "ChapterManager",
    "Event",
    "EventManager",
    "EventManagerStats",
    "EventRecord",
    "OrderListManager",
]
