from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryTheme:
    name: str
    header_class: str
    title_class: str
    counter_text_color: str
    counter_bg_color: str


DEFAULT_THEME = CategoryTheme(
    name="default",
    header_class="bg-orange-200",
    title_class="text-amber-700",
    counter_text_color="#bb4d00",
    counter_bg_color="#fff7ed",
)

CATEGORY_THEMES: dict[str, CategoryTheme] = {
    "appetizers": CategoryTheme(
        name="appetizers",
        header_class="bg-violet-200",
        title_class="text-purple-700",
        counter_text_color="#8200db",
        counter_bg_color="#f5f3ff",
    ),
    "mains": CategoryTheme(
        name="mains",
        header_class="bg-green-200",
        title_class="text-emerald-700",
        counter_text_color="#007a55",
        counter_bg_color="#f0fdf4",
    ),
    "desserts": CategoryTheme(
        name="desserts",
        header_class="bg-amber-200",
        title_class="text-yellow-700",
        counter_text_color="#a65f00",
        counter_bg_color="#fffbeb",
    ),
    "sides": CategoryTheme(
        name="sides",
        header_class="bg-blue-200",
        title_class="text-indigo-700",
        counter_text_color="#432dd7",
        counter_bg_color="#eff6ff",
    ),
    "basics": CategoryTheme(
        name="basics",
        header_class="bg-pink-200",
        title_class="text-rose-700",
        counter_text_color="#c70036",
        counter_bg_color="#fdf2f8",
    ),
}


def category_theme(category_key: str | None) -> CategoryTheme:
    if category_key is None:
        return DEFAULT_THEME
    return CATEGORY_THEMES.get(category_key, DEFAULT_THEME)
