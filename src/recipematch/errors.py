class RecipematchError(Exception):
    pass


class ConfigError(RecipematchError):
    pass


class MissingFileError(RecipematchError):
    pass


class CatalogError(RecipematchError):
    pass


class RecipeParseError(CatalogError):
    pass
