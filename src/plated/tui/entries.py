from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..config import DEFAULT_HEADER_ICON
from ..domain import AnnotatedRecipe, Recipe
from ..index import RecipeIndex
from ..views import SourceListPageView, TagPageView


@dataclass(frozen=True)
class MenuEntry:
    label: str
    kind: str
    key: str | None = None
    recipe_id: int | None = None


def home_entries(index: RecipeIndex) -> list[MenuEntry]:
    entries = [
        MenuEntry(label=f"{category.title} ({len(category.recipes)})", kind="category", key=category.key)
        for category in index.categories
    ]
    entries.append(MenuEntry(label="Index", kind="appendix"))
    entries.append(MenuEntry(label="Sources", kind="sources"))
    return entries


def tag_entries(view: TagPageView) -> list[MenuEntry]:
    return [
        MenuEntry(label=f"{entry.display_tag} ({len(entry.recipes)})", kind="tag", key=entry.tag)
        for entry in view.entries
    ]


def source_entries(view: SourceListPageView) -> list[MenuEntry]:
    return [MenuEntry(label=entry.name, kind="source", key=entry.name) for entry in view.sources]


def recipe_entries(recipes: Iterable[AnnotatedRecipe]) -> list[MenuEntry]:
    return [
        MenuEntry(label=item.name, kind="recipe", key=item.category, recipe_id=item.id)
        for item in recipes
    ]


def category_recipe_entries(category_key: str, recipes: Iterable[Recipe]) -> list[MenuEntry]:
    return recipe_entries(AnnotatedRecipe(category=category_key, recipe=recipe) for recipe in recipes)


def header_icon(icon: object) -> str:
    if icon is None:
        return DEFAULT_HEADER_ICON
    text = str(icon).strip()
    return text or DEFAULT_HEADER_ICON
