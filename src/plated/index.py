"""Derived, read-only views over a loaded recipe document.

Every function here takes the document and leaves it untouched. Recipes are
wrapped in :class:`AnnotatedRecipe` before they are pooled across categories,
since ids are only unique inside a category.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .domain import AnnotatedRecipe, Category, Recipe, RecipeDocument
from .errors import CategoryNotFoundError, RecipeNotFoundError

TagIndex = dict[str, list[AnnotatedRecipe]]

FAMILY_SOURCE = "family"
COOKBOOK_SOURCE = "cookbook"
COOKBOOK_SEPARATOR = " - "


def build_flat_list(doc: RecipeDocument) -> list[AnnotatedRecipe]:
    return [
        AnnotatedRecipe(category=category.key, recipe=recipe)
        for category in doc.categories
        for recipe in category.recipes
    ]


def build_tag_index(doc: RecipeDocument) -> TagIndex:
    return _tag_index(build_flat_list(doc))


def find_category(doc: RecipeDocument, category_key: str | None) -> Category:
    if category_key is None or category_key not in doc:
        raise CategoryNotFoundError(category_key)
    return doc[category_key]


def find_by_id(doc: RecipeDocument, category_key: str | None, recipe_id: int | None) -> Recipe:
    category = find_category(doc, category_key)
    if recipe_id is not None:
        for recipe in category.recipes:
            if recipe.id == recipe_id:
                return recipe
    raise RecipeNotFoundError(category_key, recipe_id)


def find_by_source(doc: RecipeDocument, source_name: str) -> list[AnnotatedRecipe]:
    return _with_source(build_flat_list(doc), source_name)


def unique_sources(doc: RecipeDocument) -> list[str]:
    return _unique_sources(build_flat_list(doc))


def source_key(recipe: Recipe) -> str | None:
    """Canonical identity of where a recipe comes from."""
    if recipe.source == FAMILY_SOURCE and recipe.source_text:
        return recipe.source_text
    return recipe.source


def display_source_key(recipe: Recipe) -> str | None:
    """Source name as shown on the sources page.

    Cookbook recipes carry ``"<book> - <author>"`` in their source text and are
    listed under the author. Text without the separator is used whole.
    """
    if recipe.source == COOKBOOK_SOURCE and recipe.source_text:
        parts = recipe.source_text.split(COOKBOOK_SEPARATOR)
        if len(parts) > 1 and parts[1].strip():
            return parts[1].strip()
        return recipe.source_text
    return source_key(recipe)


class RecipeIndex:
    """The document plus its flat list and tag index, built once per load."""

    def __init__(self, document: RecipeDocument) -> None:
        self.document = document
        self.recipes: tuple[AnnotatedRecipe, ...] = tuple(build_flat_list(document))
        self._tags = {tag: tuple(items) for tag, items in _tag_index(self.recipes).items()}

    @property
    def categories(self) -> tuple[Category, ...]:
        return self.document.categories

    def tag_index(self) -> TagIndex:
        return {tag: list(items) for tag, items in self._tags.items()}

    def category(self, category_key: str | None) -> Category:
        return find_category(self.document, category_key)

    def find_by_id(self, category_key: str | None, recipe_id: int | None) -> Recipe:
        return find_by_id(self.document, category_key, recipe_id)

    def find_by_source(self, source_name: str) -> list[AnnotatedRecipe]:
        return _with_source(self.recipes, source_name)

    def find_by_display_source(self, source_name: str) -> list[AnnotatedRecipe]:
        return [item for item in self.recipes if display_source_key(item.recipe) == source_name]

    def unique_sources(self) -> list[str]:
        return _unique_sources(self.recipes)


def _tag_index(recipes: Iterable[AnnotatedRecipe]) -> TagIndex:
    index: TagIndex = {}
    for item in recipes:
        seen: set[str] = set()
        for tag in item.tags:
            normalized = tag.lower()
            if normalized in seen:
                continue
            seen.add(normalized)
            index.setdefault(normalized, []).append(item)
    return index


def _with_source(recipes: Sequence[AnnotatedRecipe], source_name: str) -> list[AnnotatedRecipe]:
    return [item for item in recipes if source_key(item.recipe) == source_name]


def _unique_sources(recipes: Sequence[AnnotatedRecipe]) -> list[str]:
    found: set[str] = set()
    for item in recipes:
        key = display_source_key(item.recipe)
        if key:
            found.add(key)
    return sorted(found)
