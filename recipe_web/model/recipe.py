from dataclasses import dataclass, field

from recipe_web.errors import RecipeClientError

DRAFT_FIELDS = ("title", "ingredients", "steps")


@dataclass
class Recipe:
    id: str = ""
    title: str = ""
    ingredients: list[str] = field(default_factory=list)
    steps: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, recipe_data: dict) -> "Recipe":
        """Build a Recipe from a backend record, which names its identity `_id`."""
        if not isinstance(recipe_data, dict) or not recipe_data.get("_id"):
            raise RecipeClientError(f"Malformed recipe record: {recipe_data!r}")
        return Recipe(id=str(recipe_data["_id"]), title=recipe_data.get("title", ""),
                      ingredients=list(recipe_data.get("ingredients") or []),
                      steps=list(recipe_data.get("steps") or []))


def split_list(text: str) -> list[str]:
    """Split comma-separated input, trimming each part.

    Empty segments are kept, so "salt," gives ["salt", ""].
    """
    return [part.strip() for part in text.split(",")]


@dataclass
class FormDraft:
    title: str = ""
    ingredients: str = ""
    steps: str = ""

    def missing_fields(self) -> tuple[str, ...]:
        missing = []
        if not self.title.strip():
            missing.append("title")
        if not self.ingredients:
            missing.append("ingredients")
        if not self.steps:
            missing.append("steps")
        return tuple(missing)

    def to_create_request(self, user_id: str) -> dict:
        return {
            "userId": user_id,
            "title": self.title.strip(),
            "ingredients": split_list(self.ingredients),
            "steps": split_list(self.steps),
        }
