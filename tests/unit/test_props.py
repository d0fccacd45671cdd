import pytest

from inertia_server.protocol.props import (
    Eager,
    Lazy,
    lazy,
    merge_props,
    parse_partial_data,
    resolve_props,
    select_props,
)


def _shared():
    return {"a": 1, "b": lazy(lambda: 2), "c": 3}


def test_lazy_requires_callable():
    with pytest.raises(TypeError):
        lazy(42)


def test_merge_wraps_bare_values_and_explicit_wins():
    merged = merge_props({"user": "shared", "flash": None}, {"user": "explicit"})
    assert merged == {"user": Eager("explicit"), "flash": Eager(None)}
    assert list(merged) == ["user", "flash"]


def test_merge_keeps_tagged_props():
    producer = lazy(lambda: 1)
    merged = merge_props({"x": producer}, None)
    assert merged["x"] is producer


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, ()),
        ("", ()),
        ("a,b", ("a", "b")),
        ("a,,b,", ("a", "b")),
        ("b,a,b", ("b", "a")),
        (" a , b ", ("a", "b")),
    ],
)
def test_parse_partial_data(raw, expected):
    assert parse_partial_data(raw) == expected


def test_partial_requires_matching_component():
    merged = merge_props(_shared(), None)
    selection = select_props(merged, component="X", partial_data="a", partial_component="Y")
    assert selection.partial is False
    assert selection.keys == ("a", "b", "c")


def test_partial_requires_data_header():
    merged = merge_props(_shared(), None)
    selection = select_props(merged, component="X", partial_data=None, partial_component="X")
    assert selection.partial is False


@pytest.mark.asyncio
async def test_partial_reload_evaluates_requested_lazy_props():
    resolved = await resolve_props(
        _shared(),
        None,
        component="X",
        partial_data="a,b",
        partial_component="X",
    )
    assert resolved == {"a": 1, "b": 2}


@pytest.mark.asyncio
async def test_full_load_omits_lazy_props():
    resolved = await resolve_props(_shared(), None, component="X")
    assert resolved == {"a": 1, "c": 3}
    assert "b" not in resolved


@pytest.mark.asyncio
async def test_full_load_never_invokes_lazy_producer():
    calls = []
    resolved = await resolve_props({"report": lazy(lambda: calls.append("report"))}, None, component="X")
    assert resolved == {}
    assert calls == []


@pytest.mark.asyncio
async def test_eager_callables_are_invoked_and_awaited():
    async def fetch_users():
        return ["ada"]

    resolved = await resolve_props(
        {"users": fetch_users, "count": lambda: 3, "title": "Users"},
        None,
        component="X",
    )
    assert resolved == {"users": ["ada"], "count": 3, "title": "Users"}


@pytest.mark.asyncio
async def test_async_lazy_producer_is_awaited_on_partial_reload():
    async def heavy():
        return {"rows": 10}

    resolved = await resolve_props(
        {"heavy": Lazy(heavy)},
        None,
        component="Report",
        partial_data="heavy",
        partial_component="Report",
    )
    assert resolved == {"heavy": {"rows": 10}}


@pytest.mark.asyncio
async def test_output_order_follows_whitelist_order():
    resolved = await resolve_props(
        {"a": 1, "b": 2, "c": 3},
        None,
        component="X",
        partial_data="c,a",
        partial_component="X",
    )
    assert list(resolved) == ["c", "a"]


@pytest.mark.asyncio
async def test_evaluation_is_sequential_in_key_order():
    order = []

    async def make(name):
        order.append(name)
        return name

    resolved = await resolve_props(
        {"first": lambda: make("first"), "second": lambda: make("second"), "third": lambda: make("third")},
        None,
        component="X",
    )
    assert order == ["first", "second", "third"]
    assert list(resolved) == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_unknown_whitelist_names_are_silently_absent():
    resolved = await resolve_props(
        {"a": 1},
        None,
        component="X",
        partial_data="a,missing",
        partial_component="X",
    )
    assert resolved == {"a": 1}


@pytest.mark.asyncio
async def test_explicit_props_shadow_shared_props():
    # Silent shadowing of shared keys is the current policy.
    resolved = await resolve_props({"user": "shared", "flash": "hi"}, {"user": "explicit"}, component="X")
    assert resolved == {"user": "explicit", "flash": "hi"}


@pytest.mark.asyncio
async def test_producer_failure_propagates_unchanged():
    class Boom(Exception):
        pass

    def explode():
        raise Boom("nope")

    with pytest.raises(Boom, match="nope"):
        await resolve_props({"bad": explode}, None, component="X")


@pytest.mark.asyncio
async def test_none_values_are_kept():
    resolved = await resolve_props({"flash": None}, None, component="X")
    assert resolved == {"flash": None}
