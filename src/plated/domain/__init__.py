from .document import normalize_tags, parse_category, parse_document, parse_recipe
from .models import AnnotatedRecipe, Category, Recipe, RecipeDocument

__all__ = [
    "AnnotatedRecipe",
    "Category",
    "Recipe",
    "RecipeDocument",
    "normalize_tags",
    "parse_category",
    "parse_document",
    "parse_recipe",
]
