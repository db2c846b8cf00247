"""Jinja2-backed implementation of the ViewRenderer port."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from blog.application.interfaces import ViewRenderer

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "presentation" / "templates"


class JinjaViewRenderer(ViewRenderer):
    """Loads templates from a directory and renders them with HTML autoescaping."""

    def __init__(self, templates_dir: Path | str = TEMPLATES_DIR):
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, data: dict[str, Any]) -> bytes:
        template = self._env.get_template(template_name)
        return template.render(**data).encode("utf-8")
