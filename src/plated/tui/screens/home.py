from __future__ import annotations

from ...views import MIN_QUERY_LENGTH, normalize_query, search_view
from ..entries import header_icon, home_entries, recipe_entries
from ..textual import ComposeResult, Footer, Header, Input, ListView, Screen, Static, Vertical
from .menu import EntryItem, entry_item


class HomeScreen(Screen):
    """Category menu with search-as-you-type over every recipe."""

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self.app.cfg.tui.header_icon))
        with Vertical(classes="screen-shell"):
            yield Input(placeholder="Search recipes or tags", id="search")
            yield Static("", id="search-status", classes="empty-state", markup=False)
            yield ListView(*[entry_item(entry) for entry in home_entries(self.app.index)], id="menu")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#search", Input).focus()

    async def on_input_changed(self, event: Input.Changed) -> None:
        menu = self.query_one("#menu", ListView)
        status = self.query_one("#search-status", Static)

        if len(normalize_query(event.value)) < MIN_QUERY_LENGTH:
            entries = home_entries(self.app.index)
            status.update("")
        else:
            view = search_view(self.app.index, event.value)
            entries = recipe_entries(view.results)
            status.update(view.empty_message or "")

        await menu.clear()
        await menu.extend([entry_item(entry) for entry in entries])

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.query_one("#menu", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, EntryItem):
            self.app.open_entry(event.item.entry)
