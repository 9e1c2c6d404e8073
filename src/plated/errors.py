class PlatedError(Exception):
    pass


class ConfigError(PlatedError):
    pass


class DocumentLoadError(PlatedError):
    pass


class DocumentFormatError(DocumentLoadError):
    pass


class NotFoundError(PlatedError):
    pass


class CategoryNotFoundError(NotFoundError):
    def __init__(self, category_key: object) -> None:
        super().__init__(f"Category not found: {category_key!r}")
        self.category_key = category_key


class RecipeNotFoundError(NotFoundError):
    def __init__(self, category_key: object, recipe_id: object) -> None:
        super().__init__(f"Recipe not found: {recipe_id!r} in category {category_key!r}")
        self.category_key = category_key
        self.recipe_id = recipe_id


class PageNotFoundError(NotFoundError):
    pass
