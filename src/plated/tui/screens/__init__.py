from .home import HomeScreen
from .menu import EntryItem, MenuScreen
from .recipe import RecipeScreen

__all__ = [
    "EntryItem",
    "HomeScreen",
    "MenuScreen",
    "RecipeScreen",
]
