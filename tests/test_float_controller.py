"""Tests for FloatController."""

from storyline.core.config import FloatConfig
from storyline.misc_toolbox import (
    FloatContext,
    FloatController,
    float_event,
    get_float_controller,
)


def test_disabled_controller_drops_floats():
    fc = FloatController(enabled=False)
    assert fc.float("order.swap", list_index=0) is None
    assert fc.count_floats() == 0


def test_collects_and_filters():
    fc = FloatController(enabled=True)
    fc.float("order.swap", list_index=0)
    fc.float("order.move", list_index=1)
    fc.float("event.create.success", uid=3)

    assert fc.count_floats("order.*") == 2
    assert fc.get_float("event.create.success").data == {"uid": 3}
    assert fc.get_float("event.create.success", index=1) is None
    assert fc.get_report()["float_counts"] == {
        "order.swap": 1,
        "order.move": 1,
        "event.create.success": 1,
    }


def test_max_events_drops_oldest():
    fc = FloatController(enabled=True, max_events=2)
    fc.float("a")
    fc.float("b")
    fc.float("c")

    assert [event.name for event in fc.get_floats()] == ["b", "c"]
    assert not fc.has_float("a")


def test_max_events_keeps_name_index_in_step():
    fc = FloatController(enabled=True, max_events=3)
    for name in ["a", "b", "a", "c", "a", "b", "d"]:
        fc.float(name)

    assert [event.name for event in fc.get_floats()] == ["a", "b", "d"]
    assert fc.get_report()["float_counts"] == {"a": 1, "b": 1, "d": 1}
    assert not fc.has_float("c")
    assert fc.get_float("b") is fc.get_floats()[1]


def test_unlimited_max_events():
    fc = FloatController(enabled=True, max_events=0)
    for _ in range(50):
        fc.float("tick")
    assert fc.count_floats("tick") == 50


def test_from_config(monkeypatch):
    monkeypatch.setenv("STORYLINE_FLOAT_ENABLED", "true")
    fc = FloatController.from_config()
    assert fc.enabled is True
    assert FloatController.from_config(FloatConfig(max_events=5)).max_events == 5


def test_global_helpers_share_one_instance():
    fc = get_float_controller(enabled=True)
    float_event("chapter.add", chapter_id=1)

    assert fc is FloatController.get_instance()
    assert fc.has_float("chapter.add")


def test_float_context_restores_state():
    fc = FloatController(enabled=False)
    with FloatContext(fc) as active:
        active.float("order.move")
        assert active.has_float("order.move")
    assert fc.enabled is False
