from __future__ import annotations

from urllib.parse import urlencode

HOME_PAGE = "index.html"
CATEGORY_PAGE = "category.html"
APPENDIX_PAGE = "appendix.html"
SOURCES_PAGE = "sources.html"
RECIPE_PAGE = "recipe.html"


def category_href(category_key: str) -> str:
    return f"{CATEGORY_PAGE}?{urlencode({'category': category_key})}"


def source_href(source_name: str) -> str:
    return f"{CATEGORY_PAGE}?{urlencode({'source': source_name})}"


def recipe_href(category_key: str, recipe_id: int | None) -> str:
    query = urlencode({"category": category_key, "id": "" if recipe_id is None else recipe_id})
    return f"{RECIPE_PAGE}?{query}"


def tag_anchor(tag: str) -> str:
    return f"tag-{tag}"
