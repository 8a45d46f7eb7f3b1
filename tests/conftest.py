"""Shared fixtures for the timeline engine tests."""

import pytest

from storyline.core.config import StorylineConfig
from storyline.misc_toolbox import FloatController
from storyline.timeline import Chapter, ChapterManager, EventManager


@pytest.fixture(autouse=True)
def _isolate_global_floats():
    FloatController.reset_instance()
    yield
    FloatController.reset_instance()


@pytest.fixture
def chapters() -> ChapterManager:
    manager = ChapterManager()
    manager.add_chapter(Chapter(uid=1, name="Act I", color="#ff0000"))
    manager.add_chapter(Chapter(uid=2, name="Act II", color="#00ff00"))
    return manager


@pytest.fixture
def act_one(chapters: ChapterManager) -> Chapter:
    return chapters.get_chapter(1)


@pytest.fixture
def act_two(chapters: ChapterManager) -> Chapter:
    return chapters.get_chapter(2)


@pytest.fixture
def floats() -> FloatController:
    return FloatController(enabled=True)


@pytest.fixture
def manager(chapters: ChapterManager, floats: FloatController) -> EventManager:
    return EventManager(chapters, config=StorylineConfig(), floats=floats)


@pytest.fixture
def populated(manager: EventManager, act_one: Chapter) -> tuple[EventManager, list[int]]:
    uids = [
        manager.create_event(name, f"{name} happens", "#fff", act_one)
        for name in ("Arrival", "Storm", "Mutiny", "Landfall")
    ]
    manager.reset_changes()
    return manager, uids
