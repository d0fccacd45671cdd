from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from fastapi import FastAPI, Request  # type: ignore[import-not-found]
from fastapi.templating import Jinja2Templates  # type: ignore[import-not-found]
from starlette.responses import Response  # type: ignore[import-not-found]

from ..errors import InertiaError
from ..protocol.config_store import ConfigStore, Version, config_store
from ..protocol.contracts import ResponseEnvelope
from ..protocol.engine import InertiaEngine
from ..protocol.request import RequestSnapshot
from ..protocol.session import RenderSession
from .contracts import TemplateRenderer
from .templates import Jinja2TemplateRenderer


logger = logging.getLogger(__name__)

STATE_SLOT = "inertia"


def snapshot_request(request: Request) -> RequestSnapshot:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    headers = {
        name: ", ".join(request.headers.getlist(name))
        for name in request.headers.keys()
    }
    return RequestSnapshot(method=request.method, url=url, headers=headers)


class StarletteInertia:
    """
    Host adapter binding a render session to a Starlette request.

    Protocol replies and version conflicts are written as-is; document
    replies render the configured root template with the serialized page.
    """

    def __init__(
        self,
        request: Request,
        *,
        engine: InertiaEngine | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.request = request
        self.engine = engine or InertiaEngine()
        self.renderer = renderer or Jinja2TemplateRenderer()
        self.session = RenderSession(snapshot_request(request), self.engine)

    async def render(
        self,
        component: str,
        props: Mapping[str, Any] | None = None,
        *,
        as_string: bool = False,
    ) -> Response | str | None:
        try:
            envelope = await self.session.render(component, props)
        except InertiaError:
            raise
        except Exception:
            logger.exception(
                "Prop resolution failed: component=%s url=%s",
                component,
                self.session.request.url,
            )
            raise

        if envelope.is_protocol_reply:
            if as_string:
                return envelope.body
            return _to_response(envelope, envelope.body)

        html = self.render_document(envelope)
        if as_string:
            return html
        return _to_response(envelope, html)

    def render_document(self, envelope: ResponseEnvelope) -> str:
        current = self.engine.config
        context: dict[str, Any] = {
            "request": self.request,
            "manifest": current.manifest,
            "inertia_data": envelope.body,
        }
        context.update(envelope.view_data or {})
        return self.renderer.render(current.template_name, context)


def _to_response(envelope: ResponseEnvelope, content: str | None) -> Response:
    return Response(
        content=content or "",
        status_code=envelope.status_code,
        headers=envelope.headers,
    )


def get_inertia(request: Request) -> StarletteInertia:
    """Return the request's adapter, creating and caching it on first use."""
    inertia = getattr(request.state, STATE_SLOT, None)
    if isinstance(inertia, StarletteInertia):
        return inertia
    app_state = getattr(request.scope.get("app"), "state", None)
    inertia = StarletteInertia(
        request,
        engine=getattr(app_state, "inertia_engine", None),
        renderer=getattr(app_state, "inertia_renderer", None),
    )
    setattr(request.state, STATE_SLOT, inertia)
    return inertia


def install_inertia(
    app: FastAPI,
    *,
    template_name: str | None = None,
    version: Version | None = None,
    manifest: Mapping[str, Any] | None = None,
    templates: Jinja2Templates | str | Path | None = None,
    renderer: TemplateRenderer | None = None,
    store: ConfigStore | None = None,
) -> InertiaEngine:
    """Register the adapter on `app`; call once before serving traffic."""
    store = store or config_store
    store.set_config(template_name=template_name, version=version, manifest=manifest)
    engine = InertiaEngine(store)
    app.state.inertia_engine = engine
    app.state.inertia_renderer = renderer or Jinja2TemplateRenderer(templates)
    logger.info(
        "Inertia adapter installed: template=%s version=%s",
        store.get_config().template_name,
        store.get_config().version,
    )
    return engine
