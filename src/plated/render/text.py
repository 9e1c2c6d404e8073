from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..domain import AnnotatedRecipe, Recipe
from ..links import recipe_href
from ..views import (
    CategoryView,
    HomeView,
    RecipeDetailView,
    SearchView,
    SourceDisplay,
    SourceListPageView,
    SourcePageView,
    TagEntry,
    TagPageView,
)


def render_text(view: Any) -> str:
    if isinstance(view, list):
        return "\n".join(_render_list_item(item) for item in view)

    renderers: dict[type, Callable[[Any], list[str]]] = {
        HomeView: _home,
        CategoryView: _category,
        TagPageView: _tag_page,
        SourceListPageView: _source_list,
        SourcePageView: _source_page,
        RecipeDetailView: _recipe_detail,
        SearchView: _search,
    }
    renderer = renderers.get(type(view))
    if renderer is None:
        raise TypeError(f"No text renderer for {type(view).__name__}")
    return "\n".join(renderer(view)).rstrip() + "\n"


def _render_list_item(item: Any) -> str:
    if isinstance(item, AnnotatedRecipe):
        return _annotated_line(item)
    if isinstance(item, TagEntry):
        return "\n".join(_tag_entry(item))
    return str(item)


def _heading(title: str, underline: str = "=") -> list[str]:
    return [title, underline * len(title)]


def _recipe_line(category_key: str, recipe: Recipe) -> str:
    return f"- {recipe.name}  [{recipe_href(category_key, recipe.id)}]"


def _annotated_line(item: AnnotatedRecipe) -> str:
    return _recipe_line(item.category, item.recipe)


def _home(view: HomeView) -> list[str]:
    lines = _heading(view.page_title)
    for section in view.sections:
        lines.append("")
        lines.append(f"{section.title}  ({section.href})")
        if not section.recipes:
            lines.append("  (no recipes)")
        for recipe in section.recipes:
            lines.append("  " + _recipe_line(section.key, recipe))
    return lines


def _category(view: CategoryView) -> list[str]:
    lines = _heading(view.title)
    lines.extend(_recipe_line(view.key, recipe) for recipe in view.recipes)
    return lines


def _tag_entry(entry: TagEntry) -> list[str]:
    lines = ["", *_heading(entry.display_tag, "-")]
    lines.extend(_annotated_line(item) for item in entry.recipes)
    return lines


def _tag_page(view: TagPageView) -> list[str]:
    lines = _heading(view.title)
    if view.empty_message:
        lines.append(view.empty_message)
    for entry in view.entries:
        lines.extend(_tag_entry(entry))
    return lines


def _source_list(view: SourceListPageView) -> list[str]:
    lines = _heading(view.title)
    if view.empty_message:
        lines.append(view.empty_message)
    lines.extend(f"- {entry.name}  [{entry.href}]" for entry in view.sources)
    return lines


def _source_page(view: SourcePageView) -> list[str]:
    lines = _heading(view.name)
    if view.empty_message:
        lines.append(view.empty_message)
    lines.extend(_annotated_line(item) for item in view.recipes)
    return lines


def _source_lines(source: SourceDisplay) -> list[str]:
    label = source.label
    if source.kind == "icon":
        label = f"{label} ({source.icon})"
    lines = [f"Source: {label}"]
    if source.subtext:
        lines.append(f"  {source.subtext}")
    if source.link:
        lines.append(f"  {source.link}")
    return lines


def _numbered(title: str, steps: tuple[str, ...]) -> list[str]:
    if not steps:
        return []
    lines = ["", *_heading(title, "-")]
    lines.extend(f"{idx}. {step}" for idx, step in enumerate(steps, start=1))
    return lines


def _recipe_detail(view: RecipeDetailView) -> list[str]:
    recipe = view.recipe
    lines = _heading(recipe.name)
    lines.append(f"Category: {view.category_title}")
    if recipe.description:
        lines.append("")
        lines.append(recipe.description)
    lines.append("")
    lines.append(f"Prep Time: {recipe.prep_time} | Cook Time: {recipe.cook_time} | Servings: {recipe.servings}")
    lines.extend(_source_lines(view.source))

    if recipe.ingredients:
        lines.append("")
        lines.extend(_heading("Ingredients", "-"))
        lines.extend(f"- {item}" for item in recipe.ingredients)
    lines.extend(_numbered("Preparation", recipe.preparation))
    lines.extend(_numbered("Instructions", recipe.instructions))

    if recipe.notes:
        lines.append("")
        lines.extend(_heading("Notes", "-"))
        lines.append(recipe.notes)
    return lines


def _search(view: SearchView) -> list[str]:
    if view.empty_message:
        return [view.empty_message]
    return [_annotated_line(item) for item in view.results]
