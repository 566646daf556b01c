# style.py
import reflex as rx

shadow = "rgba(0, 0, 0, 0.15) 0px 2px 8px"
page_width = "42rem"

card_style = dict(
    background_color="rgba(255, 255, 255, 0.1)",
    border="1px solid rgba(255, 255, 255, 0.2)",
    border_radius="0.75rem",
    box_shadow=shadow,
    padding="1.5em",
    width="100%",
)

heading_style = dict(
    font_size="1.5em",
    font_weight="bold",
    text_align="center",
    margin_bottom="1em",
)

input_style = dict(
    width="100%",
    padding="0.5em 1em",
    border_radius="0.25rem",
)

button_style = dict(
    width="8em",
    background_color=rx.color("blue", 9),
    _hover={"background_color": rx.color("blue", 10)},
)

recipe_title_style = dict(
    font_size="1.25em",
    font_weight="600",
    margin_bottom="0.5em",
)

label_style = dict(font_weight="bold", color=rx.color("gray", 11))
