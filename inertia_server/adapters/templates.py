from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates  # type: ignore[import-not-found]
from jinja2 import TemplateNotFound

from ..config import config
from ..errors import TemplateNotFoundError


def resolve_template_name(name: str, extension: str | None = None) -> str:
    suffix = config.INERTIA.TEMPLATE_EXTENSION if extension is None else extension
    if not suffix or Path(name).suffix:
        return name
    return f"{name}{suffix}"


class Jinja2TemplateRenderer:
    """Renders the root template through Starlette's Jinja2 integration."""

    def __init__(
        self,
        templates: Jinja2Templates | str | Path | None = None,
        *,
        extension: str | None = None,
    ) -> None:
        if templates is None:
            templates = config.INERTIA.TEMPLATE_DIR
        if not isinstance(templates, Jinja2Templates):
            templates = Jinja2Templates(directory=str(templates))
        self.templates = templates
        self.extension = extension

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        name = resolve_template_name(template_name, self.extension)
        try:
            template = self.templates.get_template(name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(name) from exc
        return template.render(context)
