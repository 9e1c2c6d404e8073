from __future__ import annotations

from ..entries import MenuEntry, header_icon
from ..textual import ComposeResult, Footer, Header, Label, ListItem, ListView, Screen, Static, Vertical


class EntryItem(ListItem):
    """List row that carries the menu entry it opens."""

    def __init__(self, entry: MenuEntry) -> None:
        super().__init__(Label(entry.label, markup=False))
        self.entry = entry


def entry_item(entry: MenuEntry) -> EntryItem:
    return EntryItem(entry)


class MenuScreen(Screen):
    BINDINGS = [("escape", "app.pop_screen", "Back")]

    def __init__(self, title: str, entries: list[MenuEntry], empty_message: str | None = None) -> None:
        super().__init__()
        self._title = title
        self._entries = entries
        self._empty_message = empty_message

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self.app.cfg.tui.header_icon))
        with Vertical(classes="screen-shell"):
            yield Static(self._title, classes="screen-title", markup=False)
            if not self._entries and self._empty_message:
                yield Static(self._empty_message, classes="empty-state", markup=False)
            yield ListView(*[entry_item(entry) for entry in self._entries], id="menu")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#menu", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, EntryItem):
            self.app.open_entry(event.item.entry)
