from .jinja_renderer import JinjaViewRenderer

__all__ = [
    "JinjaViewRenderer",
]
