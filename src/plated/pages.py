from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import PurePosixPath
import re
from typing import Union
from urllib.parse import parse_qsl, urlsplit

from .errors import CategoryNotFoundError, PageNotFoundError, RecipeNotFoundError
from .index import RecipeIndex
from .links import APPENDIX_PAGE, CATEGORY_PAGE, HOME_PAGE, RECIPE_PAGE, SOURCES_PAGE
from .views import (
    DEFAULT_SITE,
    CategoryView,
    HomeView,
    RecipeDetailView,
    SiteSettings,
    SourceListPageView,
    SourcePageView,
    TagPageView,
    category_view,
    home_view,
    recipe_detail_view,
    source_list_page_view,
    source_page_view,
    tag_page_view,
)

PageView = Union[HomeView, CategoryView, SourcePageView, TagPageView, SourceListPageView, RecipeDetailView]

PAGE_FILES = {
    "": "home",
    HOME_PAGE: "home",
    CATEGORY_PAGE: "category",
    APPENDIX_PAGE: "appendix",
    SOURCES_PAGE: "sources",
    RECIPE_PAGE: "recipe",
}
PAGE_NAMES = frozenset(PAGE_FILES.values())

_ID_RE = re.compile(r"^-?[0-9]+$")


@dataclass(frozen=True)
class PageRequest:
    page: str
    params: Mapping[str, str] = field(default_factory=dict)

    def param(self, name: str) -> str | None:
        value = self.params.get(name)
        if value is None:
            return None
        return value.strip() or None


def parse_page_url(url: str) -> PageRequest:
    parts = urlsplit(url.strip())
    name = PurePosixPath(parts.path).name.lower() if parts.path not in ("", "/") else ""
    page = PAGE_FILES.get(name)
    if page is None and name in PAGE_NAMES:
        page = name
    if page is None:
        raise PageNotFoundError(f"Unknown page: {url!r}")

    params: dict[str, str] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        params.setdefault(key, value)
    return PageRequest(page=page, params=params)


def parse_recipe_id(value: str | None) -> int | None:
    if value is None:
        return None
    text = value.strip()
    if not _ID_RE.match(text):
        return None
    return int(text)


def build_page(index: RecipeIndex, request: PageRequest, site: SiteSettings = DEFAULT_SITE) -> PageView:
    handlers: dict[str, Callable[[RecipeIndex, PageRequest, SiteSettings], PageView]] = {
        "home": _home_page,
        "category": _category_page,
        "appendix": _appendix_page,
        "sources": _sources_page,
        "recipe": _recipe_page,
    }
    handler = handlers.get(request.page)
    if handler is None:
        raise PageNotFoundError(f"Unknown page: {request.page!r}")
    return handler(index, request, site)


def _home_page(index: RecipeIndex, request: PageRequest, site: SiteSettings) -> PageView:
    return home_view(index, site)


def _category_page(index: RecipeIndex, request: PageRequest, site: SiteSettings) -> PageView:
    source = request.param("source")
    if source is not None:
        return source_page_view(index, source, site)
    category = request.param("category")
    if category is None:
        raise CategoryNotFoundError(category)
    return category_view(index, category, site)


def _appendix_page(index: RecipeIndex, request: PageRequest, site: SiteSettings) -> PageView:
    return tag_page_view(index, site)


def _sources_page(index: RecipeIndex, request: PageRequest, site: SiteSettings) -> PageView:
    return source_list_page_view(index, site)


def _recipe_page(index: RecipeIndex, request: PageRequest, site: SiteSettings) -> PageView:
    category = request.param("category")
    raw_id = request.param("id")
    recipe_id = parse_recipe_id(raw_id)
    if recipe_id is None:
        raise RecipeNotFoundError(category, raw_id)
    return recipe_detail_view(index, category, recipe_id, site)
