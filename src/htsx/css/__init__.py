from htsx.css.recognizer import recognize_item, recognize_stylesheet
from htsx.css.render import render_item, render_stylesheet, write_item

__all__ = [
    "recognize_item",
    "recognize_stylesheet",
    "write_item",
    "render_item",
    "render_stylesheet",
]
