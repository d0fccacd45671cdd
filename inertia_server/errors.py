from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class InertiaError(Exception):
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"ok": False, "error": {"code": self.code, "message": self.message}}
        if self.details:
            payload["error"]["details"] = self.details
        return payload


class InertiaConfigError(InertiaError):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(code="INERTIA_CONFIG_INVALID", message=message, details=details or {})


class RenderSessionConsumedError(InertiaError):
    def __init__(self, message: str = "Render session was already rendered") -> None:
        super().__init__(code="RENDER_SESSION_CONSUMED", message=message)


class TemplateNotFoundError(InertiaError):
    def __init__(self, template_name: str) -> None:
        super().__init__(
            code="TEMPLATE_NOT_FOUND",
            message=f"Root template not found: {template_name}",
            details={"template_name": template_name},
        )
