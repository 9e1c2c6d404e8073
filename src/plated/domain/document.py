from __future__ import annotations

from typing import Any

from ..errors import DocumentFormatError
from .models import Category, Recipe, RecipeDocument


def parse_document(data: Any) -> RecipeDocument:
    if not isinstance(data, dict):
        raise DocumentFormatError("Recipe document must be a mapping of category keys to categories")

    categories: list[Category] = []
    for key, raw in data.items():
        categories.append(parse_category(str(key), raw))
    return RecipeDocument(categories=tuple(categories))


def parse_category(key: str, raw: Any) -> Category:
    if not isinstance(raw, dict):
        raise DocumentFormatError(f"Category {key!r} must be a mapping")
    recipes = raw.get("recipes")
    if not isinstance(recipes, list):
        raise DocumentFormatError(f"Category {key!r} is missing its 'recipes' list")

    parsed: list[Recipe] = []
    for position, item in enumerate(recipes):
        if not isinstance(item, dict):
            raise DocumentFormatError(f"Recipe #{position} in category {key!r} must be a mapping")
        parsed.append(parse_recipe(item))

    title = _optional_string(raw.get("title")) or key
    return Category(key=key, title=title, recipes=tuple(parsed))


def parse_recipe(raw: dict[str, Any]) -> Recipe:
    return Recipe(
        id=_int_value(raw.get("id")),
        name=_string_value(raw.get("name")),
        description=_string_value(raw.get("description")),
        image_url=_string_value(raw.get("imageUrl")),
        prep_time=_string_value(raw.get("prepTime")),
        cook_time=_string_value(raw.get("cookTime")),
        servings=_string_value(raw.get("servings")),
        ingredients=_string_list(raw.get("ingredients")),
        preparation=_string_list(raw.get("preparation")),
        instructions=_string_list(raw.get("instructions")),
        tags=normalize_tags(raw.get("tags")),
        source=_optional_string(raw.get("source")),
        source_text=_optional_string(raw.get("sourceText")),
        source_link=_optional_string(raw.get("sourceLink")),
        source_subtext=_optional_string(raw.get("sourceSubtext")),
        notes=_optional_string(raw.get("notes")),
    )


def normalize_tags(tags: Any) -> tuple[str, ...]:
    # Anything other than a list means "no tags", including a bare string.
    if not isinstance(tags, list):
        return ()
    return tuple(str(tag) for tag in tags if tag is not None and str(tag).strip())


def _string_list(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(item) for item in value if item is not None)


def _string_value(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_string(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _int_value(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None
