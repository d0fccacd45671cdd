"""Server-side adapter for the Inertia page-transition protocol."""

from .adapters import (
    Jinja2TemplateRenderer,
    StarletteInertia,
    flash,
    get_inertia,
    inertia_page,
    install_inertia,
)
from .errors import InertiaConfigError, InertiaError, RenderSessionConsumedError, TemplateNotFoundError
from .models import PageObject
from .protocol import (
    ConfigStore,
    InertiaEngine,
    ProtocolConfig,
    RenderSession,
    RequestSnapshot,
    ResponseEnvelope,
    config_store,
    lazy,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigStore",
    "InertiaConfigError",
    "InertiaEngine",
    "InertiaError",
    "Jinja2TemplateRenderer",
    "PageObject",
    "ProtocolConfig",
    "RenderSession",
    "RenderSessionConsumedError",
    "RequestSnapshot",
    "ResponseEnvelope",
    "StarletteInertia",
    "TemplateNotFoundError",
    "config_store",
    "flash",
    "get_inertia",
    "inertia_page",
    "install_inertia",
    "lazy",
]
