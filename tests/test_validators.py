import pytest

from lazypost_tui.core.validators import is_valid_json, is_valid_url


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "http://example.com/",
        "https://api.example.com/v1/items?id=1&sort=asc",
        "https://example.com:8080/path",
        "https://example.com:65535",
        "https://sub-domain.example.co.uk/a/b#frag",
    ],
)
def test_valid_urls(url: str) -> None:
    assert is_valid_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "",
        "notaurl",
        "example.com",
        "ftp://example.com",
        "https://",
        "https://localhost",
        "https://example",
        "https://example.com:65536",
        "https://exa mple.com",
        " https://example.com",
        "https://example.com/a b",
    ],
)
def test_invalid_urls(url: str) -> None:
    assert not is_valid_url(url)


@pytest.mark.parametrize("text", ["", "{}", "[]", '{"a": [1, 2]}', "null", "42", '"s"'])
def test_valid_json(text: str) -> None:
    assert is_valid_json(text)


@pytest.mark.parametrize("text", ["{", "{'a': 1}", "hello", "   ", '{"a": 1,}'])
def test_invalid_json(text: str) -> None:
    assert not is_valid_json(text)
