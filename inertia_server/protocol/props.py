"""
Property resolution for page replies.

Props are merged from the session's shared data and the call-site props,
narrowed by the partial-reload whitelist, then evaluated one key at a time.
A prop is either `Eager` (a plain value, or a zero-argument callable invoked
on every load) or `Lazy` (a producer only invoked when a partial reload
names it). Bare values are treated as `Eager`.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Eager:
    value: Any


@dataclass(frozen=True)
class Lazy:
    producer: Callable[[], Any]


Prop = Union[Eager, Lazy]


def lazy(producer: Callable[[], Any]) -> Lazy:
    """Mark `producer` as deferred: skipped on full loads, run on partial reloads."""
    if not callable(producer):
        raise TypeError("lazy() expects a zero-argument callable")
    return Lazy(producer)


def as_prop(value: Any) -> Prop:
    if isinstance(value, (Eager, Lazy)):
        return value
    return Eager(value)


def merge_props(
    shared: Mapping[str, Any] | None,
    props: Mapping[str, Any] | None,
) -> dict[str, Prop]:
    """Shallow merge; call-site props win over shared data on key collision."""
    merged: dict[str, Prop] = {}
    for source in (shared or {}, props or {}):
        for key, value in source.items():
            merged[key] = as_prop(value)
    return merged


@dataclass(frozen=True)
class PropSelection:
    partial: bool
    keys: tuple[str, ...]


def parse_partial_data(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    keys: list[str] = []
    for token in raw.split(","):
        name = token.strip()
        if name and name not in keys:
            keys.append(name)
    return tuple(keys)


def select_props(
    merged: Mapping[str, Prop],
    *,
    component: str,
    partial_data: str | None,
    partial_component: str | None,
) -> PropSelection:
    partial = bool(partial_data) and partial_component == component
    if partial:
        return PropSelection(partial=True, keys=parse_partial_data(partial_data))
    return PropSelection(partial=False, keys=tuple(merged))


async def _settle(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def resolve_props(
    shared: Mapping[str, Any] | None,
    props: Mapping[str, Any] | None,
    *,
    component: str,
    partial_data: str | None = None,
    partial_component: str | None = None,
) -> dict[str, Any]:
    """
    Resolve the prop map for one reply.

    Keys are evaluated sequentially in selection order and the output keeps
    that order. Names in the partial whitelist that are not props are
    skipped. Producer failures propagate unchanged.
    """
    merged = merge_props(shared, props)
    selection = select_props(
        merged,
        component=component,
        partial_data=partial_data,
        partial_component=partial_component,
    )
    if selection.partial:
        logger.debug("Partial reload: component=%s keys=%s", component, list(selection.keys))

    resolved: dict[str, Any] = {}
    for key in selection.keys:
        prop = merged.get(key)
        if prop is None:
            continue
        if isinstance(prop, Lazy):
            if not selection.partial:
                continue
            resolved[key] = await _settle(prop.producer())
        elif callable(prop.value):
            resolved[key] = await _settle(prop.value())
        else:
            resolved[key] = prop.value
    return resolved
