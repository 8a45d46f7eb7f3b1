"""Custom exceptions for the Storyline timeline engine."""


class StorylineError(Exception):
    """Base exception for all Storyline errors."""


class ConfigurationError(StorylineError):
    """Raised when configuration is invalid."""


class UIDError(StorylineError):
    """Raised when UID allocation fails."""

    def __init__(self, message: str, uid: int | None = None) -> None:
        super().__init__(message)
        self.uid = uid


class InvalidUIDError(UIDError):
    """Raised when a UID falls outside the 64-bit identifier range."""


class UIDConflictError(UIDError):
    """Raised when a UID is claimed while it is still in use."""


class UIDExhaustedError(UIDError):
    """Raised when the allocator has no identifiers left to issue."""


class EventNotFoundError(StorylineError, KeyError):
    """Raised when an operation requires an event that is not stored."""

    def __init__(self, uid: int) -> None:
        super().__init__(f"Event not found: {uid}")
        self.uid = uid

    def __str__(self) -> str:
        return f"Event not found: {self.uid}"


class DuplicateEventError(StorylineError):
    """Raised when an event is loaded under a UID that is already stored."""

    def __init__(self, uid: int) -> None:
        super().__init__(f"Event already exists: {uid}")
        self.uid = uid


class OrderListError(StorylineError):
    """Raised when an event order list operation fails."""


class OrderListNotFoundError(OrderListError):
    """Raised when an order list index does not exist."""

    def __init__(self, list_index: int, list_count: int) -> None:
        super().__init__(
            f"Order list {list_index} does not exist (order lists: {list_count})"
        )
        self.list_index = list_index
        self.list_count = list_count


class OrderPositionError(OrderListError, IndexError):
    """Raised when a position lies outside an order list."""

    def __init__(self, list_index: int, position: int, length: int) -> None:
        super().__init__(
            f"Position {position} out of range for order list {list_index} (length {length})"
        )
        self.list_index = list_index
        self.position = position
        self.length = length


class ChapterNotFoundError(StorylineError):
    """Raised when the chapter collaborator cannot resolve a chapter."""

    def __init__(self, message: str, chapter_id: object = None) -> None:
        super().__init__(message)
        self.chapter_id = chapter_id
