# state.py
import logging

import reflex as rx

from recipe_web.api.recipe_api import RecipeApi
from recipe_web.auth.identity_service import IdentityService
from recipe_web.errors import LoadFailure, SubmitFailure
from recipe_web.model.recipe import DRAFT_FIELDS, FormDraft, Recipe

MISSING_FIELDS_NOTICE = "Please fill in all fields."
SUBMIT_FAILED_NOTICE = "An error occurred while adding the recipe."

log = logging.getLogger(__name__)

_recipe_api: RecipeApi | None = None
_identity_service = IdentityService()


def get_recipe_api() -> RecipeApi:
    # Built lazily so RECIPE_API_URL is read once, at first use.
    global _recipe_api
    if _recipe_api is None:
        _recipe_api = RecipeApi.from_env()
    return _recipe_api


def get_identity_service() -> IdentityService:
    return _identity_service


class State(rx.State):
    # Recipes in fetch-then-append order, keyed by id when rendered.
    recipes: list[Recipe] = []

    # The add-recipe form, raw text as typed.
    title: str = ""
    ingredients: str = ""
    steps: str = ""

    @rx.event
    async def initialize_and_load(self):
        """Replace the recipe list with the current user's recipes from the backend."""
        user = get_identity_service().get_current_user()
        try:
            self.recipes = get_recipe_api().list_recipes(user.uid)
        except LoadFailure as e:
            log.error(f"Error loading recipes: {e}", exc_info=True)

    @rx.event
    def update_draft_field(self, field: str, value: str):
        if field not in DRAFT_FIELDS:
            raise ValueError(f"Unknown draft field: {field}")
        setattr(self, field, value)

    def _current_draft(self) -> FormDraft:
        return FormDraft(title=self.title, ingredients=self.ingredients, steps=self.steps)

    def _reset_draft(self):
        for field in DRAFT_FIELDS:
            setattr(self, field, "")

    @rx.event
    async def submit_recipe(self):
        """Send the draft to the backend and append the created recipe.

        Nothing changes locally unless the backend confirms the create; any
        failure is reported with a blocking alert.
        """
        draft = self._current_draft()
        try:
            missing = draft.missing_fields()
            if missing:
                raise SubmitFailure(f"Missing fields: {', '.join(missing)}", missing_fields=missing)
            user = get_identity_service().get_current_user()
            new_recipe = get_recipe_api().create_recipe(draft.to_create_request(user.uid))
        except SubmitFailure as e:
            if e.missing_fields:
                log.warning(f"Recipe not submitted: {e}")
                return rx.window_alert(MISSING_FIELDS_NOTICE)
            log.error(f"Error saving recipe: {e}", exc_info=True)
            return rx.window_alert(SUBMIT_FAILED_NOTICE)

        self.recipes = [*self.recipes, new_recipe]
        self._reset_draft()
        log.info(f"Recipe saved successfully: {new_recipe.id}")
