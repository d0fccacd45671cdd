from __future__ import annotations

from typing import Any, Mapping

from ..models import PageObject
from . import headers as h
from .contracts import ResponseEnvelope


def base_headers(is_protocol_reply: bool) -> dict[str, str]:
    if is_protocol_reply:
        return {
            h.CONTENT_TYPE: h.JSON_CONTENT_TYPE,
            h.VARY: "Accept",
            h.INERTIA: "true",
        }
    return {h.CONTENT_TYPE: h.HTML_CONTENT_TYPE}


def merge_headers(base: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Apply `overrides` over `base`; a name matching case-insensitively replaces the base entry."""
    merged = dict(base)
    for name, value in overrides.items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def build_envelope(
    page: PageObject,
    *,
    is_protocol_reply: bool,
    status_code: int = 200,
    custom_headers: Mapping[str, str] | None = None,
    view_data: Mapping[str, Any] | None = None,
) -> ResponseEnvelope:
    return ResponseEnvelope(
        status_code=status_code,
        headers=merge_headers(base_headers(is_protocol_reply), custom_headers or {}),
        body=page.to_json(),
        is_protocol_reply=is_protocol_reply,
        view_data=dict(view_data or {}),
    )
