from __future__ import annotations

from ..config import EffectiveConfig
from ..errors import NotFoundError
from ..index import RecipeIndex
from ..views import (
    SiteSettings,
    category_view,
    recipe_detail_view,
    source_list_page_view,
    source_page_view,
    tag_page_view,
)
from .entries import MenuEntry, category_recipe_entries, recipe_entries, source_entries, tag_entries
from .screens import HomeScreen, MenuScreen, RecipeScreen
from .textual import App, Screen
from .theme import APP_CSS


class PlatedApp(App):
    CSS = APP_CSS
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, cfg: EffectiveConfig, index: RecipeIndex) -> None:
        super().__init__()
        self.cfg = cfg
        self.index = index
        self.site = SiteSettings.from_config(cfg)
        self.title = cfg.site_title

    def on_mount(self) -> None:
        self.push_screen(HomeScreen())

    def open_entry(self, entry: MenuEntry) -> None:
        try:
            self.push_screen(self._screen_for(entry))
        except NotFoundError as exc:
            self.notify(str(exc), severity="error")

    def _screen_for(self, entry: MenuEntry) -> Screen:
        if entry.kind == "category":
            view = category_view(self.index, entry.key, self.site)
            return MenuScreen(view.title, category_recipe_entries(view.key, view.recipes))
        if entry.kind == "appendix":
            page = tag_page_view(self.index, self.site)
            return MenuScreen(page.title, tag_entries(page), page.empty_message)
        if entry.kind == "tag":
            page = tag_page_view(self.index, self.site)
            for tag in page.entries:
                if tag.tag == entry.key:
                    return MenuScreen(tag.display_tag, recipe_entries(tag.recipes))
            return MenuScreen(entry.label, [], "No recipes found.")
        if entry.kind == "sources":
            page = source_list_page_view(self.index, self.site)
            return MenuScreen(page.title, source_entries(page), page.empty_message)
        if entry.kind == "source":
            source = source_page_view(self.index, entry.key or "", self.site)
            return MenuScreen(source.name, recipe_entries(source.recipes), source.empty_message)
        return RecipeScreen(recipe_detail_view(self.index, entry.key, entry.recipe_id, self.site))
