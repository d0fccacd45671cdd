from __future__ import annotations

import logging
from typing import Any, Mapping

from ..models import PageObject
from . import headers as h
from .config_store import ConfigStore, ProtocolConfig, config_store
from .contracts import ResponseEnvelope, SessionState
from .envelope import build_envelope
from .props import resolve_props
from .request import RequestSnapshot
from .version_gate import check_asset_version


logger = logging.getLogger(__name__)


class InertiaEngine:
    """
    Translates a request plus a component and its props into a reply envelope.

    The engine is configured either with a fixed `ProtocolConfig` or with a
    `ConfigStore`; in the latter case the snapshot is read once per call.
    """

    def __init__(self, config: ProtocolConfig | ConfigStore | None = None) -> None:
        self._config = config if config is not None else config_store

    @property
    def config(self) -> ProtocolConfig:
        if isinstance(self._config, ConfigStore):
            return self._config.get_config()
        return self._config

    async def resolve(
        self,
        request: RequestSnapshot,
        component: str,
        props: Mapping[str, Any] | None = None,
        *,
        state: SessionState | None = None,
    ) -> ResponseEnvelope:
        current = self.config
        state = state or SessionState()

        conflict = check_asset_version(request, current.version)
        if conflict is not None:
            return conflict

        resolved = await resolve_props(
            state.shared_data,
            props,
            component=component,
            partial_data=request.get_header(h.INERTIA_PARTIAL_DATA),
            partial_component=request.get_header(h.INERTIA_PARTIAL_COMPONENT),
        )
        page = PageObject(
            component=component,
            props=resolved,
            url=request.page_url,
            version=current.version,
        )
        return build_envelope(
            page,
            is_protocol_reply=request.is_inertia,
            status_code=state.status_code,
            custom_headers=state.custom_headers,
            view_data=state.view_data,
        )
