"""Recipe list-and-add page."""
import reflex as rx

from recipe_web import style
from recipe_web.model.recipe import Recipe
from recipe_web.state import State


def draft_input(field: str, placeholder: str, value, multiline: bool = False) -> rx.Component:
    component = rx.text_area if multiline else rx.input
    kwargs = {"rows": "3"} if multiline else {}
    return component(
        name=field,
        placeholder=placeholder,
        value=value,
        on_change=lambda new_value: State.update_draft_field(field, new_value),
        style=style.input_style,
        **kwargs,
    )


def recipe_form() -> rx.Component:
    return rx.box(
        rx.heading("Add a Recipe", as_="h2", style=style.heading_style),
        rx.vstack(
            draft_input("title", "Title", State.title),
            draft_input("ingredients", "Ingredients (comma-separated)", State.ingredients, multiline=True),
            draft_input("steps", "Steps (comma-separated)", State.steps, multiline=True),
            rx.center(
                rx.button("Add Recipe", on_click=State.submit_recipe, style=style.button_style),
                width="100%",
            ),
            spacing="4",
            width="100%",
        ),
        style=style.card_style,
    )


def recipe_card(recipe: Recipe) -> rx.Component:
    return rx.box(
        rx.heading(recipe.title, as_="h3", style=style.recipe_title_style),
        rx.text(
            rx.text.span("Ingredients: ", style=style.label_style),
            recipe.ingredients.join(", "),
            margin_bottom="0.25em",
        ),
        rx.text(
            rx.text.span("Steps: ", style=style.label_style),
            recipe.steps.join(", "),
        ),
        key=recipe.id,
        style=style.card_style,
    )


def recipe_list() -> rx.Component:
    return rx.vstack(
        rx.foreach(State.recipes, recipe_card),
        spacing="5",
        width="100%",
    )


def index() -> rx.Component:
    return rx.center(
        rx.vstack(
            recipe_form(),
            recipe_list(),
            spacing="7",
            max_width=style.page_width,
            width="100%",
        ),
        padding_x="1em",
        padding_y="2.5em",
        min_height="100vh",
    )


app = rx.App()
app.add_page(index, title="Recipes", on_load=State.initialize_and_load)
