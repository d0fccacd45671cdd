from __future__ import annotations

from typing import Any, Callable, Mapping

from ..errors import RenderSessionConsumedError
from .contracts import ResponseEnvelope, SessionState
from .engine import InertiaEngine
from .props import Lazy, lazy
from .request import RequestSnapshot


class RenderSession:
    """
    Per-request builder for one page reply.

    Builder methods return the session so calls can be chained. A session
    renders exactly once; any mutation or second render afterwards raises
    `RenderSessionConsumedError`.
    """

    def __init__(self, request: RequestSnapshot, engine: InertiaEngine | None = None) -> None:
        self.request = request
        self.engine = engine or InertiaEngine()
        self.status_code = 200
        self.shared_data: dict[str, Any] = {}
        self.view_data: dict[str, Any] = {}
        self.custom_headers: dict[str, str] = {}
        self._rendered = False

    @staticmethod
    def lazy(producer: Callable[[], Any]) -> Lazy:
        return lazy(producer)

    @property
    def rendered(self) -> bool:
        return self._rendered

    def _ensure_open(self) -> None:
        if self._rendered:
            raise RenderSessionConsumedError()

    def share(self, data: Mapping[str, Any]) -> "RenderSession":
        """Replace the shared props with `data`."""
        self._ensure_open()
        self.shared_data = dict(data)
        return self

    def get_shared(self, key: str, default: Any = None) -> Any:
        return self.shared_data.get(key, default)

    def flush_shared(self) -> "RenderSession":
        self._ensure_open()
        self.shared_data = {}
        return self

    def with_prop(self, key: str, value: Any) -> "RenderSession":
        self._ensure_open()
        self.shared_data[key] = value
        return self

    def with_errors(self, errors: Mapping[str, list[str]]) -> "RenderSession":
        return self.with_prop("errors", dict(errors))

    def with_flash(self, message: str | Mapping[str, Any]) -> "RenderSession":
        if isinstance(message, str):
            return self.with_prop("flash", {"message": message})
        return self.with_prop("flash", dict(message))

    def with_view_data(self, key: str, value: Any) -> "RenderSession":
        self._ensure_open()
        self.view_data[key] = value
        return self

    def with_headers(self, headers: Mapping[str, str]) -> "RenderSession":
        self._ensure_open()
        self.custom_headers = {**self.custom_headers, **headers}
        return self

    def set_status_code(self, code: int) -> "RenderSession":
        self._ensure_open()
        self.status_code = int(code)
        return self

    def snapshot(self) -> SessionState:
        return SessionState(
            shared_data=dict(self.shared_data),
            view_data=dict(self.view_data),
            custom_headers=dict(self.custom_headers),
            status_code=self.status_code,
        )

    async def render(
        self,
        component: str,
        props: Mapping[str, Any] | None = None,
    ) -> ResponseEnvelope:
        self._ensure_open()
        self._rendered = True
        return await self.engine.resolve(
            self.request,
            component,
            props,
            state=self.snapshot(),
        )
