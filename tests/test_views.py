from __future__ import annotations

import pytest
from quart import Quart


async def _page(app: Quart, **query_string: str) -> str:
    test_client = app.test_client()
    response = await test_client.get("/calc", query_string=query_string)
    assert response.status_code == 200
    assert response.content_type.lower() == "text/html; charset=utf-8"
    return await response.get_data(as_text=True)


@pytest.mark.parametrize(
    "query_string, expected",
    [
        ({"op": "add", "a": "2", "b": "3"}, "<h3>Result: 5.0</h3>"),
        ({"op": "div", "a": "10", "b": "0"}, "<h3>Result: Division by zero</h3>"),
        ({"op": "div", "a": "7"}, "<h3>Result: Division by zero</h3>"),
        ({"op": "div", "a": "1", "b": "4"}, "<h3>Result: 0.25</h3>"),
        ({"op": "xyz", "a": "1", "b": "1"}, "<h3>Result: Unknown operation</h3>"),
        ({"op": ""}, "<h3>Result: Unknown operation</h3>"),
        ({"op": "sub", "a": "5"}, "<h3>Result: 5.0</h3>"),
        ({"op": "mul", "a": "-2", "b": "2.5"}, "<h3>Result: -5.0</h3>"),
        ({"op": "add", "a": "-Infinity", "b": "1"}, "<h3>Result: -inf</h3>"),
        ({"op": "add", "a": "NaN", "b": "1"}, "<h3>Result: nan</h3>"),
    ],
)
async def test_result(app: Quart, query_string: dict, expected: str) -> None:
    body = await _page(app, **query_string)
    assert expected in body
    assert "Error:" not in body


@pytest.mark.parametrize(
    "query_string",
    [
        {"op": "mul", "a": "abc", "b": "3"},
        {"op": "add", "a": "1", "b": "x"},
        {"a": "abc"},
        {"op": "add", "a": "١", "b": "1"},
        {"op": "add", "a": "５", "b": "1"},
        {"op": "add", "a": "\xa04", "b": "1"},
        {"op": "add", "a": "inf", "b": "1"},
        {"op": "add", "a": "1", "b": "nan"},
    ],
)
async def test_invalid_number(app: Quart, query_string: dict) -> None:
    body = await _page(app, **query_string)
    assert '<p style="color:red">Error: Invalid number format</p>' in body
    assert "Result:" not in body


async def test_no_parameters(app: Quart) -> None:
    body = await _page(app)
    assert body.startswith("<!doctype html>")
    assert "<title>Calculator Demo</title>" in body
    assert '<meta charset="utf-8">' in body
    assert '<form action="calc" method="get">' in body
    assert "Error:" not in body
    assert "Result:" not in body
    assert '<a href="/">Back to index</a>' in body


async def test_operand_only(app: Quart) -> None:
    body = await _page(app, a="1", b="2")
    assert "Error:" not in body
    assert "Result:" not in body


async def test_options(app: Quart) -> None:
    body = await _page(app, op="div", a="1", b="2")
    options = [
        '<option value="add">+</option>',
        '<option value="sub">-</option>',
        '<option value="mul">*</option>',
        '<option value="div">/</option>',
    ]
    positions = [body.index(option) for option in options]
    assert positions == sorted(positions)
    assert "selected" not in body


async def test_echo_raw_inputs(app: Quart) -> None:
    body = await _page(app, op="add", a="abc", b=" 2 ")
    assert 'name="a" placeholder="a" value="abc"' in body
    assert 'name="b" placeholder="b" value=" 2 "' in body


async def test_echo_is_escaped(app: Quart) -> None:
    body = await _page(app, a='"><script>alert(1)</script>')
    assert "<script>" not in body
    assert 'value="&#34;&gt;&lt;script&gt;alert(1)&lt;/script&gt;"' in body


async def test_post_not_allowed(app: Quart) -> None:
    test_client = app.test_client()
    response = await test_client.post("/calc", form={"op": "add", "a": "1", "b": "2"})
    assert response.status_code == 405


async def test_head(app: Quart) -> None:
    test_client = app.test_client()
    response = await test_client.head("/calc", query_string={"op": "add"})
    assert response.status_code == 200
