from __future__ import annotations

from dataclasses import asdict, is_dataclass
import json
from typing import Any


def to_data(view: Any) -> Any:
    if is_dataclass(view) and not isinstance(view, type):
        return asdict(view)
    if isinstance(view, (list, tuple)):
        return [to_data(item) for item in view]
    return view


def render_json(view: Any) -> str:
    return json.dumps(to_data(view), indent=2, ensure_ascii=False)
