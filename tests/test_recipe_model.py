import pytest

from recipe_web.errors import RecipeClientError
from recipe_web.model.recipe import FormDraft, Recipe, split_list


@pytest.mark.parametrize(
    "text,expected",
    (
        ("water, tea leaves", ["water", "tea leaves"]),
        ("boil, steep, serve", ["boil", "steep", "serve"]),
        ("salt,", ["salt", ""]),
        ("a,,b", ["a", "", "b"]),
        ("  single  ", ["single"]),
    ),
)
def test_split_list(text: str, expected: list[str]) -> None:
    assert split_list(text) == expected


def test_to_create_request() -> None:
    draft = FormDraft(title="Tea", ingredients="water, tea leaves", steps="boil, steep, serve")
    assert draft.to_create_request("test") == {
        "userId": "test",
        "title": "Tea",
        "ingredients": ["water", "tea leaves"],
        "steps": ["boil", "steep", "serve"],
    }


def test_to_create_request_trims_title() -> None:
    draft = FormDraft(title="  Soup ", ingredients="salt,", steps="cook")
    payload = draft.to_create_request("test")
    assert payload["title"] == "Soup"
    assert payload["ingredients"] == ["salt", ""]


def test_missing_fields() -> None:
    assert FormDraft().missing_fields() == ("title", "ingredients", "steps")
    assert FormDraft(title="", ingredients="x", steps="y").missing_fields() == ("title",)
    assert FormDraft(title="   ", ingredients="x", steps="y").missing_fields() == ("title",)
    # Whitespace-only ingredients and steps still count as filled in.
    assert FormDraft(title="T", ingredients=" ", steps=" ").missing_fields() == ()


def test_recipe_from_json() -> None:
    recipe = Recipe.from_json({"_id": "abc", "title": "Tea", "ingredients": ["water"], "steps": ["boil"]})
    assert recipe == Recipe(id="abc", title="Tea", ingredients=["water"], steps=["boil"])


@pytest.mark.parametrize("recipe_data", ({"title": "No id"}, {"_id": "", "title": "Empty id"}, ["not", "a", "dict"]))
def test_recipe_from_json_rejects_malformed(recipe_data) -> None:
    with pytest.raises(RecipeClientError):
        Recipe.from_json(recipe_data)
