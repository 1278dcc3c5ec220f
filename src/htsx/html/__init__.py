from htsx.html.recognizer import recognize_document, recognize_item
from htsx.html.render import render_document, render_item, write_item

__all__ = [
    "recognize_item",
    "recognize_document",
    "write_item",
    "render_item",
    "render_document",
]
