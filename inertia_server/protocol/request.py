from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence, Union

from . import headers as h


HeaderValue = Union[str, Sequence[str]]


def _normalize_headers(raw: Mapping[str, HeaderValue]) -> Mapping[str, str]:
    normalized: dict[str, str] = {}
    for name, value in raw.items():
        if value is None:
            continue
        if not isinstance(value, str):
            value = ", ".join(str(item) for item in value)
        normalized[str(name).lower()] = value
    return MappingProxyType(normalized)


@dataclass(frozen=True)
class RequestSnapshot:
    """
    Read-only view of the inbound request.

    Header names are matched case-insensitively; a multi-valued header is
    joined with ", " the way HTTP folds repeated fields.
    """
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    original_url: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", str(self.method).upper())
        object.__setattr__(self, "headers", _normalize_headers(self.headers))

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    @property
    def is_inertia(self) -> bool:
        return self.get_header(h.INERTIA) == "true"

    @property
    def page_url(self) -> str:
        return self.original_url or self.url
