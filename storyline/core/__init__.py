"""Core module for Storyline - configuration, errors and UID allocation."""

from storyline.core.config import FloatConfig, StorylineConfig
from storyline.core.exceptions import (
    ChapterNotFoundError,
    ConfigurationError,
    DuplicateEventError,
    EventNotFoundError,
    InvalidUIDError,
    OrderListError,
    OrderListNotFoundError,
    OrderPositionError,
    StorylineError,
    UIDConflictError,
    UIDError,
    UIDExhaustedError,
)
from storyline.core.uid import UIDAllocator

__all__ = [
    "ChapterNotFoundError",
    "ConfigurationError",
    "DuplicateEventError",
    "EventNotFoundError",
    "FloatConfig",
    "InvalidUIDError",
    "OrderListError",
    "OrderListNotFoundError",
    "OrderPositionError",
    "StorylineConfig",
    "StorylineError",
    "UIDAllocator",
    "UIDConflictError",
    "UIDError",
    "UIDExhaustedError",
]
