"""Miscellaneous toolbox - utilities and helpers."""

from storyline.misc_toolbox.float_controller import (
    FloatContext,
    FloatController,
    FloatEvent,
    float_event,
    get_float_controller,
)

__all__ = [
    "FloatContext",
    "FloatController",
    "FloatEvent",
    "float_event",
    "get_float_controller",
]
