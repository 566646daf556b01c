import logging
import os

import requests

from recipe_web.errors import LoadFailure, RecipeClientError, SubmitFailure
from recipe_web.model.recipe import Recipe

DEFAULT_API_URL = "http://localhost:5000"
RECIPES_PATH = "/api/recipes"

log = logging.getLogger(__name__)


class RecipeApi:
    """Thin client for the recipe backend's REST endpoints."""

    def __init__(self, base_url: str, session: requests.Session | None = None,
                 timeout: float | None = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "RecipeApi":
        return cls(os.getenv("RECIPE_API_URL", DEFAULT_API_URL))

    def list_recipes(self, user_id: str) -> list[Recipe]:
        """Fetch all recipes owned by `user_id`, in the order the backend returns them.

        Raises:
            LoadFailure: on network errors, non-2xx responses or a body that is not
                a list of recipe records.
        """
        url = f"{self.base_url}{RECIPES_PATH}/{user_id}"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            recipes_data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise LoadFailure(f"Failed to load recipes from {url}: {e}") from e

        if not isinstance(recipes_data, list):
            raise LoadFailure(f"Expected a list of recipes from {url}, got {type(recipes_data).__name__}")
        try:
            recipes = [Recipe.from_json(recipe_data) for recipe_data in recipes_data]
        except RecipeClientError as e:
            raise LoadFailure(str(e)) from e
        log.debug(f"Loaded {len(recipes)} recipes for {user_id}")
        return recipes

    def create_recipe(self, payload: dict) -> Recipe:
        """Create a recipe and return the stored record, including its assigned id.

        Raises:
            SubmitFailure: on network errors, non-2xx responses or a malformed record.
        """
        url = f"{self.base_url}{RECIPES_PATH}"
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            if not response.ok:
                raise SubmitFailure(f"Failed to add recipe: {response.status_code} from {url}")
            return Recipe.from_json(response.json())
        except SubmitFailure:
            raise
        except (requests.RequestException, ValueError, RecipeClientError) as e:
            raise SubmitFailure(f"Failed to add recipe: {e}") from e
