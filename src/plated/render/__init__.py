from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .serialize import render_json, to_data
from .text import render_text

Renderer = Callable[[Any], str]


def get_renderer(as_json: bool) -> Renderer:
    return render_json if as_json else render_text


__all__ = ["Renderer", "get_renderer", "render_json", "render_text", "to_data"]
