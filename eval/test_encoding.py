"""Tests for collector URL and query string encoding."""
from rztracker.encoding import (
    build_query_string, build_url, encode_component, parse_query_string,
)
from rztracker.models import TrackerOptions


def test_build_url_https_default():
    assert build_url("collector.example.com", TrackerOptions()) == \
        "https://collector.example.com/track"


def test_build_url_http():
    assert build_url("collector.example.com", TrackerOptions(use_https=False)) == \
        "http://collector.example.com/track"


def test_build_url_does_not_validate_host():
    assert build_url("not a host/", TrackerOptions()) == "https://not a host//track"


def test_encode_component_matches_browser_escaping():
    assert encode_component("http://site.example/page?a=1&b=2") == \
        "http%3A%2F%2Fsite.example%2Fpage%3Fa%3D1%26b%3D2"
    assert encode_component("a b+c") == "a%20b%2Bc"
    assert encode_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_component("café") == "caf%C3%A9"


def test_encode_component_scalars():
    assert encode_component(1) == "1"
    assert encode_component(True) == "true"
    assert encode_component(False) == "false"


def test_query_string_order_and_format():
    params = {"idsite": 3, "rec": 1, "url": "http://x/", "apiv": 1}
    assert build_query_string(params) == "?idsite=3&rec=1&url=http%3A%2F%2Fx%2F&apiv=1"


def test_query_string_empty():
    assert build_query_string({}) == "?"


def test_parse_query_string_keeps_order():
    parsed = parse_query_string("?idsite=3&url=http%3A%2F%2Fx%2F&action_name=Hello%20World")
    assert list(parsed) == ["idsite", "url", "action_name"]
    assert parsed["url"] == "http://x/"
    assert parsed["action_name"] == "Hello World"


def test_parse_query_string_empty():
    assert parse_query_string("?") == {}
    assert parse_query_string("") == {}
