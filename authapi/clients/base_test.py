"""Tests for the shared request helpers."""

import pytest

from authapi.clients.base import is_json


@pytest.mark.parametrize(
    "content_type",
    ["application/json", "application/json; charset=utf-8", "application/problem+json", "Application/Vnd.API+JSON"],
)
def test_is_json(content_type: str) -> None:
    assert is_json(content_type)


@pytest.mark.parametrize("content_type", ["", "text/plain; charset=utf-8", "text/html", "application/jsonp"])
def test_is_not_json(content_type: str) -> None:
    assert not is_json(content_type)
