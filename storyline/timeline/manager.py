"""
Event Manager - the single mutation surface for events and order lists.

Events live in a dict keyed by UID. Event order lists are lists of those
UIDs in a specific order, which lets the host switch between different
timeline orderings and edit one of them at a time.

Handles:
- Creating, editing, removing events
- Keeping chapter event collections in step
- Appending new UIDs to, and stripping removed UIDs from, every order list
- Swapping and moving events within one order list
- Loading persisted events and order lists without marking changes
"""

from collections.abc import Iterable
import logging
from typing import Any

from storyline.core.config import FloatConfig, StorylineConfig
from storyline.core.exceptions import DuplicateEventError, EventNotFoundError
from storyline.core.uid import UIDAllocator
from storyline.misc_toolbox import FloatController, get_float_controller
from storyline.timeline.changes import ChangeTracker
from storyline.timeline.chapters import ChapterDirectory, ChapterLinker
from storyline.timeline.models import Event, EventManagerStats, EventRecord
from storyline.timeline.order import OrderListManager

logger = logging.getLogger(__name__)


class EventManager:
    """
    Manager for timeline events and event order lists.

    Usage:
        >>> chapters = ChapterManager()
        >>> chapter = chapters.add_chapter(Chapter(uid=1, name="Act I"))
        >>> events = EventManager(chapters)
        >>> uid = events.create_event("Arrival", "The ship lands", "#fff", chapter)
        >>> events.get_order(0)[-1] == uid
        True
    """

    def __init__(
        self,
        chapters: ChapterDirectory,
        config: StorylineConfig | None = None,
        allocator: UIDAllocator | None = None,
        floats: FloatController | None = None,
    ) -> None:
        """
        Initialize EventManager with its default order lists.

        Args:
            chapters: Chapter collaborator used for cross-referencing
            config: Engine configuration (defaults to environment/defaults)
            allocator: UID allocator (one is created from config if omitted)
            floats: Float controller (omitted: a private enabled one when
                floats_enabled is set, else the global one)
        """
        self.config = config or StorylineConfig()
        self._events: dict[int, Event] = {}
        self._orders = OrderListManager(default_lists=self.config.default_order_lists)
        self._chapters = ChapterLinker(chapters)
        self._changes = ChangeTracker()
        self._uids = allocator or UIDAllocator(
            start=self.config.uid_start, reuse=self.config.reuse_uids
        )
        if floats is not None:
            self._floats = floats
            if self.config.floats_enabled:
                self._floats.enable()
        elif self.config.floats_enabled:
            self._floats = FloatController.from_config(FloatConfig(enabled=True))
        else:
            self._floats = get_float_controller()

        logger.info(
            "EventManager initialized (order_lists=%d, reuse_uids=%s)",
            self._orders.count,
            self._uids.reuse,
        )

    @property
    def allocator(self) -> UIDAllocator:
        return self._uids

    @property
    def floats(self) -> FloatController:
        return self._floats

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, uid: object) -> bool:
        return uid in self._events

    # Lifecycle

    def create_event(self, name: str, description: str, color: str, chapter_ref: Any) -> int:
        """
        Create an event and place it at the back of every order list.

        Args:
            name: Event name
            description: Event description
            color: Display tag
            chapter_ref: Owning chapter

        Returns:
            UID of the new event

        Raises:
            ChapterNotFoundError: If the chapter cannot be resolved
        """
        chapter = self._chapters.resolve(chapter_ref)

        uid = self._uids.next_uid()
        try:
            event = Event(
                uid=uid,
                name=name,
                description=description,
                color=color,
                chapter_ref=chapter_ref,
            )
        except Exception:
            self._uids.remove_uid(uid)
            raise

        self._events[uid] = event
        self._chapters.attach(chapter, event)

        self._orders.ensure_default()
        self._orders.append_everywhere(uid)

        self._changes.mark("create")
        logger.debug("Created event %d (%s) in chapter %s", uid, name, event.chapter_id)
        self._floats.float("event.create.success", uid=uid, chapter_id=event.chapter_id)
        return uid

    def create_detached(
        self,
        uid: int,
        name: str,
        description: str,
        chapter_ref: Any = None,
        color: str | None = None,
    ) -> Event:
        """
        Restore an event under a known UID.

        Only for loading a project: order lists are loaded separately through
        add_order_list, chapter collections are left alone and no change is
        recorded.

        Args:
            uid: Persisted UID
            name: Event name
            description: Event description
            chapter_ref: Owning chapter, if known
            color: Display tag (defaults to the chapter's color)

        Returns:
            The restored event

        Raises:
            DuplicateEventError: If the UID is already stored
        """
        if color is None:
            color = getattr(chapter_ref, "color", "")

        event = Event(
            uid=uid,
            name=name,
            description=description,
            color=color,
            chapter_ref=chapter_ref,
        )
        self.add_event(event)
        return event

    def add_event(self, event: Event) -> None:
        """
        Restore an already built event.

        Raises:
            DuplicateEventError: If the UID is already stored
            UIDConflictError: If the allocator already handed out the UID
        """
        if event.uid in self._events:
            logger.warning("Refusing to load duplicate event %d", event.uid)
            raise DuplicateEventError(event.uid)

        self._uids.claim(event.uid)
        self._events[event.uid] = event

        logger.debug("Loaded event %d (%s)", event.uid, event.name)
        self._floats.float("event.load", uid=event.uid)

    def edit_event(self, uid: int, name: str, description: str, chapter_ref: Any) -> bool:
        """
        Overwrite an event's name, description and chapter.

        A chapter change moves the event between the two chapters' collections.
        An event that has a chapter cannot be edited to have none.

        Returns:
            True if the event was edited, False if the UID is unknown

        Raises:
            ChapterNotFoundError: If a chapter involved cannot be resolved,
                or chapter_ref is None for an event that has a chapter
            ValidationError: If the new name or description is invalid
        """
        event = self._events.get(uid)
        if event is None:
            logger.debug("Edit of unknown event %d ignored", uid)
            self._floats.float("event.edit.missing", uid=uid)
            return False

        # New values are validated on a merged copy before anything is mutated.
        Event.model_validate({**event.model_dump(), "name": name, "description": description})

        # Only load-time events may stay chapter-less; a None reference is rejected otherwise.
        new_chapter = None
        if chapter_ref is not None or event.chapter_ref is not None:
            new_chapter = self._chapters.resolve(chapter_ref)

        relink = getattr(chapter_ref, "uid", None) != event.chapter_id
        old_chapter = None
        if relink and event.chapter_ref is not None:
            old_chapter = self._chapters.resolve(event.chapter_ref)

        event.name = name
        event.description = description
        event.chapter_ref = chapter_ref
        if relink:
            if old_chapter is not None:
                self._chapters.detach(old_chapter, event)
            if new_chapter is not None:
                self._chapters.attach(new_chapter, event)

        self._changes.mark("edit")
        logger.debug("Edited event %d", uid)
        self._floats.float("event.edit.success", uid=uid, relinked=relink)
        return True

    def remove_event(self, uid: int) -> None:
        """
        Remove an event from its chapter, the store and every order list.

        The UID is released back to the allocator.

        Raises:
            EventNotFoundError: If the UID is unknown
            ChapterNotFoundError: If the event's chapter cannot be resolved
        """
        event = self._events.get(uid)
        if event is None:
            logger.warning("Cannot remove unknown event %d", uid)
            raise EventNotFoundError(uid)

        chapter = None
        if event.chapter_ref is not None:
            chapter = self._chapters.resolve(event.chapter_ref)

        if chapter is not None:
            self._chapters.detach(chapter, event)
        del self._events[uid]
        self._uids.remove_uid(uid)
        self._orders.remove_everywhere(uid)

        self._changes.mark("remove")
        logger.debug("Removed event %d", uid)
        self._floats.float("event.remove.success", uid=uid)

    # Queries

    def get_event(self, uid: int) -> Event | None:
        return self._events.get(uid)

    def get_event_by_name(self, name: str) -> Event | None:
        """
        Find an event by name, ignoring case.

        Returns:
            The first match, or None
        """
        wanted = name.casefold()
        for event in self._events.values():
            if event.name.casefold() == wanted:
                return event
        return None

    def get_event_data(self, uid: int) -> EventRecord | None:
        event = self._events.get(uid)
        if event is None:
            return None
        return event.to_record()

    def snapshot_all(self) -> list[EventRecord]:
        """
        Export every event.

        Returns:
            One record per event, in no particular order (empty if none)
        """
        return [event.to_record() for event in self._events.values()]

    # Order lists

    @property
    def order_list_count(self) -> int:
        return self._orders.count

    def get_order(self, list_index: int) -> tuple[int, ...] | None:
        """
        Get the UIDs of one order list.

        Returns:
            The UIDs in order, or None for an unknown list index
        """
        return self._orders.get_order(list_index)

    def get_orders(self) -> list[tuple[int, ...]]:
        return self._orders.get_orders()

    def index_of(self, list_index: int, uid: int) -> int:
        return self._orders.index_of(list_index, uid)

    def swap(self, list_index: int, pos_a: int, pos_b: int) -> None:
        """
        Swap two events on one order list.

        Raises:
            OrderListNotFoundError: If the list does not exist
            OrderPositionError: If a position is out of range
        """
        self._orders.swap(list_index, pos_a, pos_b)
        self._changes.mark("swap")
        self._floats.float("order.swap", list_index=list_index, pos_a=pos_a, pos_b=pos_b)

    def move(self, list_index: int, from_pos: int, to_pos: int) -> None:
        """
        Move one event to another position on one order list.

        Raises:
            OrderListNotFoundError: If the list does not exist
            OrderPositionError: If a position is out of range
        """
        self._orders.move(list_index, from_pos, to_pos)
        self._changes.mark("move")
        self._floats.float("order.move", list_index=list_index, from_pos=from_pos, to_pos=to_pos)

    def add_order_list(self, initial_sequence: Iterable[int] = ()) -> int:
        """
        Add an order list. Only for loading a project.

        Args:
            initial_sequence: UIDs of stored events, in order

        Returns:
            Index of the new list

        Raises:
            EventNotFoundError: If a UID is not stored
            OrderListError: If a UID is repeated
        """
        order = list(initial_sequence)
        for uid in order:
            if uid not in self._events:
                logger.warning("Order list references unknown event %d", uid)
                raise EventNotFoundError(uid)

        index = self._orders.add_order_list(order)
        logger.debug("Loaded order list %d with %d events", index, len(order))
        return index

    # Change tracking

    def has_changed(self) -> bool:
        return self._changes.changed

    def reset_changes(self) -> None:
        self._changes.reset()

    def clear(self) -> None:
        """Remove all events and order lists and forget pending changes."""
        self._events.clear()
        self._orders.clear()
        self._uids.reset()
        self._changes.reset()
        logger.info("EventManager cleared")

    def get_stats(self) -> EventManagerStats:
        return EventManagerStats(
            total_events=len(self._events),
            order_list_count=self._orders.count,
            uids_in_use=self._uids.in_use_count,
            has_changed=self._changes.changed,
        )

    def __repr__(self) -> str:
        return f"EventManager(events={len(self._events)}, order_lists={self._orders.count})"
