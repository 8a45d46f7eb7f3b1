"""Pydantic models for timeline events."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from storyline.core.config import MAX_UID


class Event(BaseModel):
    """
    Represents one narrative unit on the timeline.

    The chapter reference points at the owning chapter object, whose own
    event collection points back here, so it is kept out of dumps and reprs.
    """

    uid: int = Field(..., ge=0, le=MAX_UID, frozen=True, description="Unique event UID")
    name: str = Field(..., description="Event name")
    description: str = Field(default="", description="Event description")
    color: str = Field(default="", description="Opaque display tag")
    chapter_ref: Any = Field(
        default=None,
        exclude=True,
        repr=False,
        description="Owning chapter (None only for events restored without one)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "uid": 1997,
                "name": "The Beginning",
                "description": "This is where it all began",
                "color": "#ffffff",
            }
        }
    )

    @property
    def chapter_id(self) -> Any:
        """UID of the owning chapter, or None."""
        return getattr(self.chapter_ref, "uid", None)

    def to_record(self) -> "EventRecord":
        return EventRecord(
            uid=self.uid,
            name=self.name,
            description=self.description,
            chapter_ref=self.chapter_ref,
            color=self.color,
        )

    def __repr__(self) -> str:
        """Repr representation."""
        return f"Event(uid={self.uid}, name={self.name!r}, chapter={self.chapter_id!r})"


class EventRecord(BaseModel):
    """Point-in-time export row for one event."""

    uid: int = Field(..., description="Event UID")
    name: str = Field(..., description="Event name")
    description: str = Field(..., description="Event description")
    chapter_ref: Any = Field(default=None, repr=False, description="Owning chapter")
    color: str = Field(default="", description="Opaque display tag")

    model_config = ConfigDict(frozen=True)


class EventManagerStats(BaseModel):
    """Statistics about an event manager."""

    total_events: int = Field(0, description="Number of stored events")
    order_list_count: int = Field(0, description="Number of event order lists")
    uids_in_use: int = Field(0, description="UIDs the allocator considers live")
    has_changed: bool = Field(False, description="Whether unsaved mutations exist")
