from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Recipe:
    id: int | None
    name: str
    description: str = ""
    image_url: str = ""
    prep_time: str = ""
    cook_time: str = ""
    servings: str = ""
    ingredients: tuple[str, ...] = ()
    preparation: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    source: str | None = None
    source_text: str | None = None
    source_link: str | None = None
    source_subtext: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class Category:
    key: str
    title: str
    recipes: tuple[Recipe, ...] = ()


@dataclass(frozen=True)
class AnnotatedRecipe:
    """A recipe paired with the key of the category that owns it.

    Recipe ids are only unique inside a category, so anything pooling recipes
    across categories carries this wrapper instead of the bare recipe.
    """

    category: str
    recipe: Recipe

    @property
    def id(self) -> int | None:
        return self.recipe.id

    @property
    def name(self) -> str:
        return self.recipe.name

    @property
    def tags(self) -> tuple[str, ...]:
        return self.recipe.tags


@dataclass(frozen=True)
class RecipeDocument(Mapping[str, Category]):
    """Categories keyed by category key, iterated in document order."""

    categories: tuple[Category, ...] = ()
    _by_key: dict[str, Category] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_key", {category.key: category for category in self.categories})

    def __getitem__(self, key: str) -> Category:
        return self._by_key[key]

    def __iter__(self) -> Iterator[str]:
        return (category.key for category in self.categories)

    def __len__(self) -> int:
        return len(self.categories)
