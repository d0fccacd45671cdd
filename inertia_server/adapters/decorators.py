"""
Route decorators for FastAPI endpoints.

`inertia_page` renders whatever props mapping the endpoint returns as the
named component; `flash` merges flash data into the request's render
session after the endpoint runs. Stack `flash` below `inertia_page` so the
flash data is in place before rendering:

    @router.get("/users")
    @inertia_page("Users/Index")
    @flash("Loaded")
    async def users():
        return {"users": [...]}

Endpoints need not declare a `Request` parameter; one is added to the
signature FastAPI sees when missing.
"""

from __future__ import annotations

import functools
import inspect
import typing
from typing import Any, Callable

from fastapi import Request  # type: ignore[import-not-found]
from starlette.concurrency import run_in_threadpool  # type: ignore[import-not-found]
from starlette.responses import Response  # type: ignore[import-not-found]

from .host import get_inertia


INJECTED_REQUEST_PARAM = "inertia_request"


def _resolved_signature(endpoint: Callable[..., Any]) -> inspect.Signature:
    signature = inspect.signature(endpoint)
    if hasattr(endpoint, "__signature__"):
        return signature
    try:
        hints = typing.get_type_hints(endpoint)
    except NameError:
        return signature
    params = [
        param.replace(annotation=hints.get(name, param.annotation))
        for name, param in signature.parameters.items()
    ]
    return signature.replace(
        parameters=params,
        return_annotation=hints.get("return", signature.return_annotation),
    )


def _request_param(signature: inspect.Signature) -> str | None:
    for name, param in signature.parameters.items():
        annotation = param.annotation
        if isinstance(annotation, type) and issubclass(annotation, Request):
            return name
    return None


def _with_request_param(signature: inspect.Signature) -> inspect.Signature:
    params = list(signature.parameters.values())
    injected = inspect.Parameter(
        INJECTED_REQUEST_PARAM,
        inspect.Parameter.KEYWORD_ONLY,
        annotation=Request,
    )
    insert_at = len(params)
    for index, param in enumerate(params):
        if param.kind == inspect.Parameter.VAR_KEYWORD:
            insert_at = index
            break
    params.insert(insert_at, injected)
    return signature.replace(parameters=params)


def _wrap_endpoint(
    endpoint: Callable[..., Any],
    after: Callable[[Request, Any], Any],
    *,
    return_annotation: Any = inspect.Signature.empty,
) -> Callable[..., Any]:
    signature = _resolved_signature(endpoint)
    request_name = _request_param(signature)
    injected = request_name is None
    if injected:
        signature = _with_request_param(signature)
        request_name = INJECTED_REQUEST_PARAM
    if return_annotation is not inspect.Signature.empty:
        signature = signature.replace(return_annotation=return_annotation)

    @functools.wraps(endpoint)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request = kwargs.pop(request_name) if injected else kwargs[request_name]
        if inspect.iscoroutinefunction(endpoint):
            result = await endpoint(*args, **kwargs)
        else:
            result = await run_in_threadpool(endpoint, *args, **kwargs)
        return await after(request, result)

    # FastAPI must see the rewritten signature, not the wrapped endpoint's
    del wrapper.__wrapped__
    wrapper.__signature__ = signature  # type: ignore[attr-defined]
    return wrapper


def inertia_page(component: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(endpoint: Callable[..., Any]) -> Callable[..., Any]:
        async def render(request: Request, result: Any) -> Any:
            if isinstance(result, Response):
                return result
            return await get_inertia(request).render(component, result)

        return _wrap_endpoint(endpoint, render, return_annotation=Response)

    return decorator


def flash(message: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """`message` is flash data, or a callable computing it from the endpoint's result."""
    def decorator(endpoint: Callable[..., Any]) -> Callable[..., Any]:
        async def merge(request: Request, result: Any) -> Any:
            data = message(result) if callable(message) else message
            if data is not None:
                get_inertia(request).session.with_flash(data)
            return result

        return _wrap_endpoint(endpoint, merge)

    return decorator
