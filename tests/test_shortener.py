# link-shortener/tests/test_shortener.py
import re

import pytest
from shortener import DEFAULT_TOKEN_LENGTH, MAX_TOKEN_LENGTH, generate_short_url


def test_known_digests():
    assert generate_short_url("") == "d41d8cd9"
    assert generate_short_url("hello") == "5d41402a"


@pytest.mark.parametrize(
    "url", ["https://example.com", "", " ", "https://example.com/ünïcode?x=1"]
)
def test_deterministic_and_hex(url):
    token = generate_short_url(url)
    assert token == generate_short_url(url)
    assert len(token) == DEFAULT_TOKEN_LENGTH
    assert re.fullmatch(r"[0-9a-f]{8}", token)


def test_distinct_urls_usually_differ():
    assert generate_short_url("https://example.com") != generate_short_url("https://example.org")


def test_length_is_a_prefix_of_the_digest():
    full = generate_short_url("https://example.com", MAX_TOKEN_LENGTH)
    assert len(full) == MAX_TOKEN_LENGTH
    for length in (1, 4, 8, 16):
        assert generate_short_url("https://example.com", length) == full[:length]


@pytest.mark.parametrize("length", [0, -1, MAX_TOKEN_LENGTH + 1])
def test_rejects_out_of_range_length(length):
    with pytest.raises(ValueError):
        generate_short_url("https://example.com", length)


def test_lone_surrogate_does_not_raise():
    token = generate_short_url("https://x/\ud800")
    assert re.fullmatch(r"[0-9a-f]{8}", token)
