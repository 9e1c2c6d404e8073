from __future__ import annotations

from ..config import EffectiveConfig
from ..index import RecipeIndex
from ..loader import load_configured_document


def run_tui(cfg: EffectiveConfig) -> int:
    from .app import PlatedApp

    index = RecipeIndex(load_configured_document(cfg))
    app = PlatedApp(cfg, index)
    app.run()
    return 0


__all__ = ["run_tui"]
