"""
Chapter cross-referencing.

Chapters are owned by a separate collaborator. The engine only needs to
look a chapter up by its UID and append to or remove from its ``events``
collection; ChapterDirectory describes that capability.

ChapterManager is a small in-memory directory for hosts that have no
chapter layer of their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from storyline.core.exceptions import ChapterNotFoundError
from storyline.misc_toolbox import float_event

if TYPE_CHECKING:
    from storyline.timeline.models import Event

logger = logging.getLogger(__name__)


@runtime_checkable
class ChapterDirectory(Protocol):
    """
    Protocol for the chapter collaborator.

    get_chapter must return an object exposing a mutable ``events`` list,
    and may signal an unknown chapter by raising LookupError or returning None.
    """

    def get_chapter(self, chapter_id: Any) -> Any: ...


class Chapter(BaseModel):
    """A chapter grouping events."""

    uid: int = Field(..., description="Chapter UID")
    name: str = Field(..., description="Chapter name")
    description: str = Field(default="", description="Chapter description")
    color: str = Field(default="", description="Display tag inherited by restored events")
    events: list[Any] = Field(
        default_factory=list, exclude=True, repr=False, description="Events in this chapter"
    )

    def __repr__(self) -> str:
        """Repr representation."""
        return f"Chapter(uid={self.uid}, name={self.name!r}, events={len(self.events)})"


class ChapterManager:
    """In-memory chapter directory keyed by chapter UID."""

    def __init__(self) -> None:
        self._chapters: dict[int, Chapter] = {}

    def add_chapter(self, chapter: Chapter) -> Chapter:
        self._chapters[chapter.uid] = chapter
        float_event("chapter.add", chapter_id=chapter.uid)
        return chapter

    def remove_chapter(self, chapter_id: int) -> Chapter | None:
        return self._chapters.pop(chapter_id, None)

    def get_chapter(self, chapter_id: int) -> Chapter:
        """
        Look up a chapter.

        Raises:
            ChapterNotFoundError: If no chapter has this UID
        """
        try:
            return self._chapters[chapter_id]
        except KeyError as e:
            msg = f"Chapter not found: {chapter_id}"
            raise ChapterNotFoundError(msg, chapter_id=chapter_id) from e

    def list_chapters(self) -> list[Chapter]:
        return list(self._chapters.values())

    def __len__(self) -> int:
        return len(self._chapters)


class ChapterLinker:
    """Keeps chapter event collections in step with the event store."""

    def __init__(self, directory: ChapterDirectory) -> None:
        self.directory = directory

    def resolve(self, chapter_ref: Any) -> Any:
        """
        Find the live chapter behind a chapter reference.

        Args:
            chapter_ref: Object carrying the chapter's ``uid``

        Returns:
            The chapter returned by the directory

        Raises:
            ChapterNotFoundError: If the directory cannot resolve it
        """
        chapter_id = getattr(chapter_ref, "uid", None)
        if chapter_id is None:
            msg = f"Chapter reference has no uid: {chapter_ref!r}"
            logger.warning(msg)
            raise ChapterNotFoundError(msg)

        try:
            chapter = self.directory.get_chapter(chapter_id)
        except ChapterNotFoundError:
            logger.warning("Chapter lookup failed: %s", chapter_id)
            raise
        except LookupError as e:
            logger.warning("Chapter lookup failed: %s", chapter_id)
            msg = f"Chapter not found: {chapter_id}"
            raise ChapterNotFoundError(msg, chapter_id=chapter_id) from e

        if chapter is None:
            logger.warning("Chapter lookup returned nothing: %s", chapter_id)
            msg = f"Chapter not found: {chapter_id}"
            raise ChapterNotFoundError(msg, chapter_id=chapter_id)

        return chapter

    @staticmethod
    def attach(chapter: Any, event: Event) -> None:
        chapter.events.append(event)

    @staticmethod
    def detach(chapter: Any, event: Event) -> bool:
        """
        Remove an event from a chapter's collection by identity.

        Returns:
            True if the event was present
        """
        for i, item in enumerate(chapter.events):
            if item is event:
                del chapter.events[i]
                return True

        logger.debug("Event %d was not in chapter %s", event.uid, getattr(chapter, "uid", "?"))
        return False
