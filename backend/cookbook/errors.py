"""
Failure kinds raised by the catalog core.

Everything derives from CookbookError so the HTTP layer can translate the whole
family into a 400 in one place. Malformed payloads never get this far: they are
rejected by pydantic before an entry reaches the registrar.
"""


class CookbookError(Exception):
    """Base class for every deterministic catalog failure."""

    message = "Cookbook operation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


# --- registration -----------------------------------------------------------

class EntryValidationError(CookbookError):
    message = "Cookbook entry is invalid."


class DuplicateNameError(EntryValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("An existing entry with the same name already exist.")


class DuplicateRequiredItemError(EntryValidationError):
    def __init__(self, recipe_name: str, item_name: str):
        self.recipe_name = recipe_name
        self.item_name = item_name
        super().__init__("Required items cannot have multiple elements with the same name.")


# --- lookup -----------------------------------------------------------------

class CatalogLookupError(CookbookError, LookupError):
    message = "Catalog lookup failed."


class RecipeNotFoundError(CatalogLookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("No recipe with the provided name found.")


class NotARecipeError(CatalogLookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__("An existing ingredient has the provided name.")


# --- resolution -------------------------------------------------------------

class ResolutionError(CookbookError):
    message = "The recipe could not be resolved."


class UnresolvableItemError(ResolutionError):
    def __init__(self, item_name: str, recipe_name: str):
        self.item_name = item_name
        self.recipe_name = recipe_name
        super().__init__("The recipe contains recipes or ingredients not in the cookbook.")


class CyclicReferenceError(ResolutionError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cyclic reference detected at recipe '{name}'.")
