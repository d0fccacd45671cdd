from .decorators import flash, inertia_page
from .host import StarletteInertia, get_inertia, install_inertia, snapshot_request
from .templates import Jinja2TemplateRenderer

__all__ = [
    "Jinja2TemplateRenderer",
    "StarletteInertia",
    "flash",
    "get_inertia",
    "inertia_page",
    "install_inertia",
    "snapshot_request",
]
