"""Display-ready view models, one builder per page type.

Builders read from a :class:`RecipeIndex` and return frozen dataclasses that a
renderer can paint without touching the document again. Empty results come
back as empty tuples plus an ``empty_message``; only structurally missing
keys raise :class:`NotFoundError` subclasses.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar

from unidecode import unidecode

from .config import DEFAULT_SITE_TITLE, AssetsConfig, EffectiveConfig
from .domain import AnnotatedRecipe, Recipe
from .index import FAMILY_SOURCE, RecipeIndex, display_source_key, source_key
from .links import category_href, source_href, tag_anchor
from .paths import avatar_path
from .theme import DEFAULT_THEME, CategoryTheme, category_theme

MIN_QUERY_LENGTH = 2
SOURCE_ICONS = ("cookbook", "instagram", "youtube")
DEFAULT_SOURCE_ICON = "link"
NO_SOURCE_LABEL = "N/A"


NamedT = TypeVar("NamedT", Recipe, AnnotatedRecipe)


@dataclass(frozen=True)
class SiteSettings:
    title: str = DEFAULT_SITE_TITLE
    avatar_template: str = AssetsConfig.avatar_template

    @classmethod
    def from_config(cls, cfg: EffectiveConfig) -> SiteSettings:
        return cls(title=cfg.site_title, avatar_template=cfg.assets.avatar_template)

    def page_title(self, title: str) -> str:
        return f"{title} - {self.title}"


DEFAULT_SITE = SiteSettings()


@dataclass(frozen=True)
class NavLink:
    key: str
    title: str
    href: str


@dataclass(frozen=True)
class CategorySection:
    key: str
    title: str
    href: str
    recipes: tuple[Recipe, ...]


@dataclass(frozen=True)
class HomeView:
    page_title: str
    navigation: tuple[NavLink, ...]
    sections: tuple[CategorySection, ...]


@dataclass(frozen=True)
class CategoryView:
    key: str
    title: str
    page_title: str
    theme: CategoryTheme
    recipes: tuple[Recipe, ...]


@dataclass(frozen=True)
class TagEntry:
    tag: str
    display_tag: str
    anchor: str
    recipes: tuple[AnnotatedRecipe, ...]


@dataclass(frozen=True)
class TagPageView:
    title: str
    page_title: str
    theme: CategoryTheme
    entries: tuple[TagEntry, ...]
    empty_message: str | None = None


@dataclass(frozen=True)
class SourceEntry:
    name: str
    avatar: str
    href: str


@dataclass(frozen=True)
class SourceListPageView:
    title: str
    page_title: str
    theme: CategoryTheme
    sources: tuple[SourceEntry, ...]
    empty_message: str | None = None


@dataclass(frozen=True)
class SourcePageView:
    name: str
    page_title: str
    theme: CategoryTheme
    recipes: tuple[AnnotatedRecipe, ...]
    empty_message: str | None = None


@dataclass(frozen=True)
class SourceDisplay:
    kind: str
    label: str
    icon: str
    avatar: str | None = None
    subtext: str | None = None
    link: str | None = None
    href: str | None = None


@dataclass(frozen=True)
class RecipeDetailView:
    category: str
    category_title: str
    page_title: str
    theme: CategoryTheme
    recipe: Recipe
    source: SourceDisplay


@dataclass(frozen=True)
class SearchView:
    query: str
    results: tuple[AnnotatedRecipe, ...]
    empty_message: str | None = None


def name_sort_key(name: str) -> tuple[str, str]:
    """Case- and accent-insensitive ordering; lower case wins ties."""
    return unidecode(name).casefold(), name.swapcase()


def sort_by_name(items: Iterable[NamedT]) -> list[NamedT]:
    return sorted(items, key=lambda item: name_sort_key(item.name))


def display_tag(tag: str) -> str:
    return tag[:1].upper() + tag[1:]


def normalize_query(raw_query: str | None) -> str:
    return (raw_query or "").lower().strip()


def navigation(index: RecipeIndex) -> tuple[NavLink, ...]:
    return tuple(
        NavLink(key=category.key, title=category.title, href=category_href(category.key))
        for category in index.categories
    )


def home_view(index: RecipeIndex, site: SiteSettings = DEFAULT_SITE) -> HomeView:
    sections = tuple(
        CategorySection(
            key=category.key,
            title=category.title,
            href=category_href(category.key),
            recipes=tuple(sort_by_name(category.recipes)),
        )
        for category in index.categories
    )
    return HomeView(page_title=site.title, navigation=navigation(index), sections=sections)


def category_view(index: RecipeIndex, category_key: str | None, site: SiteSettings = DEFAULT_SITE) -> CategoryView:
    category = index.category(category_key)
    return CategoryView(
        key=category.key,
        title=category.title,
        page_title=site.page_title(category.title),
        theme=category_theme(category.key),
        recipes=tuple(sort_by_name(category.recipes)),
    )


def tag_index_view(index: RecipeIndex) -> list[TagEntry]:
    entries: list[TagEntry] = []
    for tag, recipes in sorted(index.tag_index().items()):
        entries.append(
            TagEntry(
                tag=tag,
                display_tag=display_tag(tag),
                anchor=tag_anchor(tag),
                recipes=tuple(sort_by_name(recipes)),
            )
        )
    return entries


def tag_page_view(index: RecipeIndex, site: SiteSettings = DEFAULT_SITE) -> TagPageView:
    entries = tuple(tag_index_view(index))
    return TagPageView(
        title="Index",
        page_title=site.page_title("Index"),
        theme=DEFAULT_THEME,
        entries=entries,
        empty_message=None if entries else "No tags found.",
    )


def source_list_view(index: RecipeIndex) -> list[str]:
    return index.unique_sources()


def source_list_page_view(index: RecipeIndex, site: SiteSettings = DEFAULT_SITE) -> SourceListPageView:
    sources = tuple(
        SourceEntry(name=name, avatar=avatar_path(site.avatar_template, name), href=source_href(name))
        for name in source_list_view(index)
    )
    return SourceListPageView(
        title="Sources",
        page_title=site.page_title("Sources"),
        theme=DEFAULT_THEME,
        sources=sources,
        empty_message=None if sources else "No sources found.",
    )


def source_detail_view(index: RecipeIndex, source_name: str) -> list[AnnotatedRecipe]:
    # Names on the sources page are display keys; links from a recipe carry
    # the canonical key. Either one selects the recipes.
    matches = [
        item
        for item in index.recipes
        if source_key(item.recipe) == source_name or display_source_key(item.recipe) == source_name
    ]
    return sort_by_name(matches)


def source_page_view(index: RecipeIndex, source_name: str, site: SiteSettings = DEFAULT_SITE) -> SourcePageView:
    recipes = tuple(source_detail_view(index, source_name))
    return SourcePageView(
        name=source_name,
        page_title=site.page_title(source_name),
        theme=DEFAULT_THEME,
        recipes=recipes,
        empty_message=None if recipes else f'No recipes found for "{source_name}".',
    )


def recipe_detail_view(
    index: RecipeIndex,
    category_key: str | None,
    recipe_id: int | None,
    site: SiteSettings = DEFAULT_SITE,
) -> RecipeDetailView:
    category = index.category(category_key)
    recipe = index.find_by_id(category.key, recipe_id)
    return RecipeDetailView(
        category=category.key,
        category_title=category.title,
        page_title=site.page_title(recipe.name),
        theme=category_theme(category.key),
        recipe=recipe,
        source=source_display(recipe, site),
    )


def source_display(recipe: Recipe, site: SiteSettings = DEFAULT_SITE) -> SourceDisplay:
    if not recipe.source:
        return SourceDisplay(kind="none", label=NO_SOURCE_LABEL, icon=DEFAULT_SOURCE_ICON)

    if recipe.source == FAMILY_SOURCE and recipe.source_text:
        name = recipe.source_text
        return SourceDisplay(
            kind="person",
            label=name,
            icon="family",
            avatar=avatar_path(site.avatar_template, name),
            link=recipe.source_link,
            href=source_href(name),
        )

    icon = recipe.source.lower()
    return SourceDisplay(
        kind="icon",
        label=recipe.source_text or recipe.source,
        icon=icon if icon in SOURCE_ICONS else DEFAULT_SOURCE_ICON,
        subtext=recipe.source_subtext,
        link=recipe.source_link,
        href=source_href(recipe.source),
    )


def search_results(index: RecipeIndex, raw_query: str | None) -> list[AnnotatedRecipe]:
    query = normalize_query(raw_query)
    if len(query) < MIN_QUERY_LENGTH:
        return []
    return [
        item
        for item in index.recipes
        if query in item.name.lower() or any(query in tag.lower() for tag in item.tags)
    ]


def search_view(index: RecipeIndex, raw_query: str | None) -> SearchView:
    raw = raw_query or ""
    results = tuple(search_results(index, raw))
    empty_message = None
    if not results and len(normalize_query(raw)) >= MIN_QUERY_LENGTH:
        empty_message = f'No recipes found for "{raw}".'
    return SearchView(query=raw, results=results, empty_message=empty_message)
