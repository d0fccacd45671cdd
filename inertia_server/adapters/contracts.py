from __future__ import annotations

from typing import Any, Protocol


class TemplateRenderer(Protocol):
    def render(self, template_name: str, context: dict[str, Any]) -> str:
        ...
