"""Port for turning a named template and its data into an HTML document."""

from abc import ABC, abstractmethod
from typing import Any


class ViewRenderer(ABC):
    """Renders HTML views — implemented in the infrastructure layer."""

    @abstractmethod
    def render(self, template_name: str, data: dict[str, Any]) -> bytes:
        """Render ``template_name`` with ``data`` and return UTF-8 encoded HTML."""
        ...
