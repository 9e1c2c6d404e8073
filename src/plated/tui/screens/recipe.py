from __future__ import annotations

from ...render import render_text
from ...views import RecipeDetailView
from ..entries import header_icon
from ..textual import ComposeResult, Footer, Header, Screen, Static, VerticalScroll


class RecipeScreen(Screen):
    BINDINGS = [("escape", "app.pop_screen", "Back")]

    def __init__(self, view: RecipeDetailView) -> None:
        super().__init__()
        self.detail = view

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self.app.cfg.tui.header_icon))
        with VerticalScroll(id="recipe-body"):
            yield Static(render_text(self.detail), markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.detail.page_title
        self.query_one("#recipe-body", VerticalScroll).focus()
