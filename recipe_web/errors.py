class RecipeClientError(Exception):
    """Base class for failures talking to the recipe backend."""


class LoadFailure(RecipeClientError):
    """The initial recipe fetch failed."""


class SubmitFailure(RecipeClientError):
    """A recipe could not be submitted, either locally invalid or rejected by the backend."""

    def __init__(self, message: str, missing_fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.missing_fields = missing_fields
