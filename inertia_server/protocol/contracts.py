from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class ResponseEnvelope:
    status_code: int
    headers: dict[str, str]
    body: str | None
    is_protocol_reply: bool
    view_data: dict[str, Any] | None = None


@dataclass(frozen=True)
class SessionState:
    """Per-request state accumulated by a render session before rendering."""
    shared_data: Mapping[str, Any] = field(default_factory=dict)
    view_data: Mapping[str, Any] = field(default_factory=dict)
    custom_headers: Mapping[str, str] = field(default_factory=dict)
    status_code: int = 200
